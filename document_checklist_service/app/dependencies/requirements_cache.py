from fastapi import HTTPException, Request

from document_checklist_service.infrastructure.requirements_cache import RequirementsTemplateCache

async def get_requirements_cache(request: Request) -> RequirementsTemplateCache:
    """
    FastAPI dependency provider for the application-owned requirement template cache,
    created at startup and kept in `request.app.state.requirements_cache`.
    """
    cache = getattr(request.app.state, "requirements_cache", None)
    if cache is None:
        raise HTTPException(status_code=503, detail="Requirement template cache is not initialized.")
    return cache
