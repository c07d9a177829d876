# Application Configuration using Pydantic BaseSettings
from pydantic_settings import BaseSettings
from typing import Optional

class AppSettings(BaseSettings):
    # Observability
    LOG_LEVEL: str = "INFO"
    OTEL_EXPORTER_OTLP_TRACES_ENDPOINT: Optional[str] = None
    OTEL_EXPORTER_OTLP_METRICS_ENDPOINT: Optional[str] = None
    SERVICE_NAME_API: str = "document-checklist-api"

    # Requirements (template) service client
    REQUIREMENTS_SERVICE_URL: Optional[str] = None # e.g., http://localhost:8081/api/v1
    DEFAULT_HTTP_TIMEOUT: float = 5.0

    # Exception-case rules
    EXCEPTION_EXPOSURE_THRESHOLD: float = 1_000_000

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

# Instantiate settings to be imported by other modules
settings = AppSettings()

import logging
logger = logging.getLogger(__name__)
logger.info("Application settings module initialized.")
