# Application-owned cache of the requirement template document
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from document_checklist_service.app.models import DocumentRequirements

logger = logging.getLogger(__name__)

RequirementsLoader = Callable[[], Awaitable[DocumentRequirements]]


class RequirementsTemplateCache:
    """
    Holds one DocumentRequirements for the lifetime of its owner (the
    application instance). The template is loaded on first `get()`; failed
    loads are not cached, so the next `get()` tries again.

    `replace()` and `invalidate()` win over a load already in flight: a load
    result is only stored if neither was called while the loader ran.
    """

    def __init__(self, loader: RequirementsLoader):
        self._loader = loader
        self._template: Optional[DocumentRequirements] = None
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._template is not None

    async def get(self) -> DocumentRequirements:
        if self._template is not None:
            return self._template
        async with self._lock:
            # Another caller may have loaded it while we waited
            if self._template is not None:
                return self._template
            logger.info("Requirement template not cached; loading.")
            generation = self._generation
            loaded = await self._loader()
            if generation == self._generation:
                self._template = loaded
                return loaded
            logger.info("Requirement template changed while loading; discarding the loaded copy.")
            return self._template if self._template is not None else loaded

    def invalidate(self) -> None:
        self._generation += 1
        if self._template is not None:
            logger.info("Requirement template cache invalidated.")
        self._template = None

    def replace(self, template: DocumentRequirements) -> None:
        """Stores a template just written to the requirements service."""
        self._generation += 1
        self._template = template
        logger.info("Requirement template cache replaced with updated template.")
