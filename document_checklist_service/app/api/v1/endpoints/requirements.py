# API Router for the cached requirement template
import logging

from fastapi import APIRouter, Body, Depends, HTTPException

from document_checklist_service.app.models import DocumentRequirements
from document_checklist_service.app.dependencies.requirements_cache import get_requirements_cache
from document_checklist_service.app.service.exceptions import ConfigurationError, RequirementsUnavailableError
from document_checklist_service.app.service.interfaces.requirements_client import AbstractRequirementsClient
from document_checklist_service.infrastructure.requirements_cache import RequirementsTemplateCache
from document_checklist_service.infrastructure.requirements_client import get_requirements_client

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "",
    response_model=DocumentRequirements,
    summary="Current requirement template (served from cache)."
)
async def get_requirements_api(cache: RequirementsTemplateCache = Depends(get_requirements_cache)):
    try:
        return await cache.get()
    except (RequirementsUnavailableError, ConfigurationError) as e:
        logger.warning(f"Requirement template unavailable: {e}")
        raise HTTPException(status_code=503, detail="Document requirements are currently unavailable.")


@router.put(
    "",
    response_model=DocumentRequirements,
    summary="Replace the requirement template and refresh the cache."
)
async def update_requirements_api(
    request_data: DocumentRequirements = Body(...),
    cache: RequirementsTemplateCache = Depends(get_requirements_cache),
    client: AbstractRequirementsClient = Depends(get_requirements_client),
):
    try:
        updated = await client.update_requirements(request_data)
    except (RequirementsUnavailableError, ConfigurationError) as e:
        logger.warning(f"Requirement template update failed: {e}")
        raise HTTPException(status_code=503, detail="Document requirements could not be updated.")
    cache.replace(updated)
    return updated


@router.post(
    "/invalidate",
    status_code=204,
    summary="Drop the cached requirement template; the next request reloads it."
)
async def invalidate_requirements_api(cache: RequirementsTemplateCache = Depends(get_requirements_cache)):
    cache.invalidate()
