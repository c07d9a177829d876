# Client for the external requirements (template) service
import logging

import httpx # For async HTTP calls
from fastapi import Depends
from pydantic import ValidationError

from document_checklist_service.app.config import settings
from document_checklist_service.app.models import DocumentRequirements
from document_checklist_service.app.observability import requirements_fetch_counter
from document_checklist_service.app.service.exceptions import ConfigurationError, RequirementsUnavailableError
from document_checklist_service.app.service.interfaces.requirements_client import AbstractRequirementsClient
from document_checklist_service.app.dependencies.http_client import get_http_client

logger = logging.getLogger(__name__)

REQUIREMENTS_PATH = "/document-requirements"


class RequirementsServiceClient(AbstractRequirementsClient):
    def __init__(self, http_client: httpx.AsyncClient):
        self.http_client = http_client

    def _requirements_url(self) -> str:
        if not settings.REQUIREMENTS_SERVICE_URL:
            raise ConfigurationError("REQUIREMENTS_SERVICE_URL is not set; cannot reach the requirements service.")
        return f"{settings.REQUIREMENTS_SERVICE_URL.rstrip('/')}{REQUIREMENTS_PATH}"

    async def _send(self, method: str, payload: dict = None) -> DocumentRequirements:
        request_url = self._requirements_url()
        logger.debug(f"{method} {request_url}")
        try:
            response = await self.http_client.request(method, request_url, json=payload)
            response.raise_for_status()
            requirements = DocumentRequirements.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            requirements_fetch_counter.add(1, {"outcome": "http_error"})
            logger.error(f"HTTP error calling requirements service: {e.response.status_code} - {e.response.text}", exc_info=True)
            raise RequirementsUnavailableError(f"requirements service returned {e.response.status_code}") from e
        except httpx.RequestError as e:
            requirements_fetch_counter.add(1, {"outcome": "request_error"})
            logger.error(f"Request error calling requirements service: {e}", exc_info=True)
            raise RequirementsUnavailableError(f"request failed: {e}") from e
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            requirements_fetch_counter.add(1, {"outcome": "invalid_payload"})
            logger.error(f"Could not decode requirement template from requirements service: {e}", exc_info=True)
            raise RequirementsUnavailableError("invalid requirement template payload") from e

        requirements_fetch_counter.add(1, {"outcome": "success"})
        return requirements

    async def fetch_requirements(self) -> DocumentRequirements:
        requirements = await self._send("GET")
        logger.info(
            f"Fetched document requirements: {len(requirements.entity_templates)} entity templates, "
            f"{len(requirements.individual_templates)} individual templates."
        )
        return requirements

    async def update_requirements(self, requirements: DocumentRequirements) -> DocumentRequirements:
        updated = await self._send("PUT", requirements.model_dump(mode="json", by_alias=True))
        logger.info("Document requirements updated on the requirements service.")
        return updated


# DI provider for RequirementsServiceClient
def get_requirements_client(
    http_client: httpx.AsyncClient = Depends(get_http_client)
) -> AbstractRequirementsClient:
    return RequirementsServiceClient(http_client=http_client)
