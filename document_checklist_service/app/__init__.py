# document_checklist_service/app/__init__.py
import logging

logger = logging.getLogger(__name__)
logger.info("Document Checklist App Initialized")
