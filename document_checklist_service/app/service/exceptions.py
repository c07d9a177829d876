"""
Custom exceptions for the Document Checklist service.
"""

class BaseChecklistServiceError(Exception):
    """Base class for exceptions in this module."""
    pass

class RequirementsUnavailableError(BaseChecklistServiceError):
    """Raised when the requirement template cannot be fetched or decoded."""
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Document requirements unavailable: {reason}")

class ConfigurationError(BaseChecklistServiceError):
    """Raised when a configuration issue is detected."""
    pass
