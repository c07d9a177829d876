from abc import ABC, abstractmethod

from document_checklist_service.app.models import DocumentRequirements


class AbstractRequirementsClient(ABC):
    @abstractmethod
    async def fetch_requirements(self) -> DocumentRequirements:
        """
        Retrieves the current requirement template document.

        Returns:
            The DocumentRequirements served by the requirements service.

        Raises:
            RequirementsUnavailableError: if the template cannot be retrieved.
        """
        pass

    @abstractmethod
    async def update_requirements(self, requirements: DocumentRequirements) -> DocumentRequirements:
        """
        Replaces the requirement template document and returns the stored version.
        """
        pass
