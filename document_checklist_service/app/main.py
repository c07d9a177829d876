# FastAPI Application Entry Point
import logging
from fastapi import FastAPI
import httpx

# Configuration and Observability
from document_checklist_service.app.config import settings
from document_checklist_service.app.observability import setup_opentelemetry, logger

# Initialize OpenTelemetry
setup_opentelemetry(service_name=settings.SERVICE_NAME_API)

# Import instrumentors after OTel SDK is initialized
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

from document_checklist_service.infrastructure.requirements_cache import RequirementsTemplateCache
from document_checklist_service.infrastructure.requirements_client import RequirementsServiceClient

# API Routers
from document_checklist_service.app.api.v1.endpoints import health as health_router
from document_checklist_service.app.api.v1.endpoints import checklists as checklists_router
from document_checklist_service.app.api.v1.endpoints import requirements as requirements_router

# --- FastAPI Application Instance ---
app = FastAPI(
    title="Document Checklist Service",
    description="Reconciles document versions into requirement checklists, ad-hoc rows, history and preview indexes.",
    version="0.1.0"
)

# --- Event Handlers for HTTP client & template cache lifecycle ---
@app.on_event("startup")
async def startup_event():
    logger.info("FastAPI application startup...")
    app.state.http_client = httpx.AsyncClient(timeout=settings.DEFAULT_HTTP_TIMEOUT)
    HTTPXClientInstrumentor().instrument()
    logger.info(f"HTTPX AsyncClient initialized with timeout {settings.DEFAULT_HTTP_TIMEOUT} and instrumented.")

    # One template cache per application instance, discarded on shutdown
    requirements_client = RequirementsServiceClient(http_client=app.state.http_client)
    app.state.requirements_cache = RequirementsTemplateCache(loader=requirements_client.fetch_requirements)
    if not settings.REQUIREMENTS_SERVICE_URL:
        logger.warning("REQUIREMENTS_SERVICE_URL not set. Case checklists will be unavailable until it is configured.")

@app.on_event("shutdown")
async def shutdown_event():
    logger.info("FastAPI application shutdown...")

    if getattr(app.state, "requirements_cache", None) is not None:
        app.state.requirements_cache.invalidate()

    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        logger.info("HTTPX AsyncClient closed.")

FastAPIInstrumentor.instrument_app(app)
logger.info("FastAPI instrumentation complete.")

# Include API Routers
app.include_router(health_router.router)
app.include_router(checklists_router.router, prefix="/api/v1/checklists", tags=["Checklists"])
app.include_router(requirements_router.router, prefix="/api/v1/requirements", tags=["Document Requirements"])

logger.info("API routers included. Application setup complete.")

# To run: uvicorn document_checklist_service.app.main:app --reload --port 8000
