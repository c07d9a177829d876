# Client-side placeholders for ad-hoc documents the user intends to upload
import logging
import time
import uuid
from typing import List, Tuple

from document_checklist_service.app.models import DocStatus, OwnerRef, PlaceholderRow
from document_checklist_service.app.models.checklist import PLACEHOLDER_ID_PREFIX

logger = logging.getLogger(__name__)


def new_placeholder_id() -> str:
    # Millisecond timestamp plus a random suffix: unique even within one millisecond
    return f"{PLACEHOLDER_ID_PREFIX}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


def create_placeholder(document_type: str, owner: OwnerRef) -> PlaceholderRow:
    return PlaceholderRow(
        id=new_placeholder_id(),
        name=document_type,
        display_name=document_type,
        required=False,
        status=DocStatus.MISSING,
        owner_id=owner.id,
        owner_name=owner.name,
        owner_type=owner.owner_type,
        is_ad_hoc=True,
    )


class PlaceholderSet:
    """
    Placeholder rows held by the view layer between "add document" and the
    refresh that follows a successful upload. Creation order is preserved.
    """

    def __init__(self):
        self._rows: List[PlaceholderRow] = []

    @property
    def rows(self) -> Tuple[PlaceholderRow, ...]:
        return tuple(self._rows)

    def add(self, document_type: str, owner: OwnerRef) -> PlaceholderRow:
        placeholder = create_placeholder(document_type, owner)
        self._rows.append(placeholder)
        logger.info(f"Created placeholder {placeholder.id} for '{document_type}' (owner {owner.id}).")
        return placeholder

    def remove(self, placeholder_id: str) -> bool:
        """Drops the placeholder with this id. Removing an unknown id is a no-op."""
        remaining = [row for row in self._rows if row.id != placeholder_id]
        removed = len(remaining) != len(self._rows)
        self._rows = remaining
        if removed:
            logger.info(f"Removed placeholder {placeholder_id}.")
        return removed

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(self.rows)
