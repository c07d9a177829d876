# API Router for Health Checks
from fastapi import APIRouter, Depends
import logging

from document_checklist_service.app.config import settings
from document_checklist_service.app.dependencies.requirements_cache import get_requirements_cache
from document_checklist_service.infrastructure.requirements_cache import RequirementsTemplateCache

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/health", tags=["Monitoring"])
async def health_check(cache: RequirementsTemplateCache = Depends(get_requirements_cache)):
    requirements_status = "cached" if cache.is_loaded else "not_loaded"
    return {"status": "ok", "components": {"requirements_template": requirements_status}, "service_name": settings.SERVICE_NAME_API}
