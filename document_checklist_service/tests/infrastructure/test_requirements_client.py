# Unit Tests for the Requirements Service Client
import json
import pytest
from unittest.mock import AsyncMock, MagicMock
import httpx

from document_checklist_service.app import config as app_config
from document_checklist_service.app.models import DocumentRequirements
from document_checklist_service.app.service.exceptions import ConfigurationError, RequirementsUnavailableError
from document_checklist_service.infrastructure.requirements_client import RequirementsServiceClient

SERVICE_URL = "http://fake-requirements-service.com/api/v1"

TEMPLATE_PAYLOAD = {
    "entityTemplates": {"Non-Listed Company": [{"name": "Certificate of Incorporation", "required": True}]},
    "individualTemplates": {"Foreigner": [{"name": "Passport", "required": True}]},
    "riskBasedDocuments": {},
    "entityRoleMapping": {},
}


@pytest.fixture(autouse=True)
def manage_requirements_service_url():
    original_url = app_config.settings.REQUIREMENTS_SERVICE_URL
    app_config.settings.REQUIREMENTS_SERVICE_URL = SERVICE_URL
    yield
    app_config.settings.REQUIREMENTS_SERVICE_URL = original_url


def create_mock_http_client(response=None, side_effect=None) -> AsyncMock:
    mock_http_client = AsyncMock(spec=httpx.AsyncClient)
    mock_http_client.request = AsyncMock(return_value=response, side_effect=side_effect)
    return mock_http_client


def create_mock_response(payload=None, status_code: int = 200) -> MagicMock:
    mock_response = MagicMock(spec=httpx.Response)
    mock_response.status_code = status_code
    mock_response.json.return_value = payload
    return mock_response


@pytest.mark.asyncio
async def test_fetch_requirements_success():
    mock_http_client = create_mock_http_client(create_mock_response(TEMPLATE_PAYLOAD))
    client = RequirementsServiceClient(http_client=mock_http_client)

    requirements = await client.fetch_requirements()

    assert isinstance(requirements, DocumentRequirements)
    assert requirements.entity_templates["Non-Listed Company"][0].document_type == "Certificate of Incorporation"
    mock_http_client.request.assert_called_once_with("GET", f"{SERVICE_URL}/document-requirements", json=None)


@pytest.mark.asyncio
async def test_fetch_requirements_trailing_slash_in_url():
    app_config.settings.REQUIREMENTS_SERVICE_URL = f"{SERVICE_URL}/"
    mock_http_client = create_mock_http_client(create_mock_response(TEMPLATE_PAYLOAD))

    await RequirementsServiceClient(http_client=mock_http_client).fetch_requirements()

    assert mock_http_client.request.call_args[0][1] == f"{SERVICE_URL}/document-requirements"


@pytest.mark.asyncio
async def test_fetch_requirements_no_service_url():
    app_config.settings.REQUIREMENTS_SERVICE_URL = None
    mock_http_client = create_mock_http_client()

    with pytest.raises(ConfigurationError):
        await RequirementsServiceClient(http_client=mock_http_client).fetch_requirements()
    mock_http_client.request.assert_not_called()


@pytest.mark.asyncio
async def test_fetch_requirements_http_status_error():
    mock_response = create_mock_response(status_code=503)
    mock_response.text = "Service Unavailable"
    mock_response.request = MagicMock(spec=httpx.Request)
    mock_response.raise_for_status = MagicMock(
        side_effect=httpx.HTTPStatusError("Error 503", request=mock_response.request, response=mock_response)
    )
    client = RequirementsServiceClient(http_client=create_mock_http_client(mock_response))

    with pytest.raises(RequirementsUnavailableError) as exc_info:
        await client.fetch_requirements()
    assert "503" in str(exc_info.value)


@pytest.mark.asyncio
async def test_fetch_requirements_request_error():
    client = RequirementsServiceClient(
        http_client=create_mock_http_client(side_effect=httpx.RequestError("Connection failed", request=MagicMock()))
    )

    with pytest.raises(RequirementsUnavailableError):
        await client.fetch_requirements()


@pytest.mark.asyncio
async def test_fetch_requirements_json_decode_error():
    mock_response = create_mock_response()
    mock_response.json.side_effect = json.JSONDecodeError("Invalid JSON", "{}", 0)
    client = RequirementsServiceClient(http_client=create_mock_http_client(mock_response))

    with pytest.raises(RequirementsUnavailableError):
        await client.fetch_requirements()


@pytest.mark.asyncio
async def test_fetch_requirements_invalid_template_shape():
    client = RequirementsServiceClient(
        http_client=create_mock_http_client(create_mock_response({"entityTemplates": "not-a-mapping"}))
    )

    with pytest.raises(RequirementsUnavailableError):
        await client.fetch_requirements()


@pytest.mark.asyncio
async def test_update_requirements_sends_camel_case_payload():
    mock_http_client = create_mock_http_client(create_mock_response(TEMPLATE_PAYLOAD))
    client = RequirementsServiceClient(http_client=mock_http_client)
    template = DocumentRequirements.model_validate(TEMPLATE_PAYLOAD)

    updated = await client.update_requirements(template)

    assert updated == template
    method, url = mock_http_client.request.call_args[0]
    sent = mock_http_client.request.call_args[1]["json"]
    assert method == "PUT"
    assert url == f"{SERVICE_URL}/document-requirements"
    assert sent["individualTemplates"]["Foreigner"][0]["documentType"] == "Passport"
