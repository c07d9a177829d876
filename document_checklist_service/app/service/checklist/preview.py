# Navigable preview sequence over checklist rows that have uploaded content
import logging
from typing import List, Optional

from document_checklist_service.app.models import ChecklistRow, DocStatus

logger = logging.getLogger(__name__)

# Rows in the preview sequence are ordinary checklist rows with content.
PreviewableRow = ChecklistRow


def build_index(rows: List[ChecklistRow]) -> List[PreviewableRow]:
    """Rows with something to preview (status other than Missing), in display order."""
    return [row for row in rows or [] if row.status != DocStatus.MISSING]


def index_of(rows: List[PreviewableRow], target: ChecklistRow) -> int:
    """Position of `target` in a preview index, matched by row id; -1 when absent."""
    for position, row in enumerate(rows):
        if row.id == target.id:
            return position
    return -1


class PreviewNavigator:
    """
    Next/previous navigation over a preview index frozen when the preview is
    opened. Later refreshes of the underlying rows do not affect an open
    navigator; the caller opens a new one to pick them up.
    """

    def __init__(self, rows: List[PreviewableRow], position: int = 0):
        if not 0 <= position < len(rows or []):
            raise ValueError(f"Preview position {position} is outside an index of {len(rows or [])} rows.")
        self._rows = list(rows)
        self._position = position

    @classmethod
    def open(cls, rows: List[ChecklistRow], start_row: ChecklistRow) -> Optional["PreviewNavigator"]:
        """Opens a preview at `start_row`; None when that row has nothing to preview."""
        index = build_index(rows)
        position = index_of(index, start_row)
        if position == -1:
            logger.debug(f"Row {start_row.id} is not previewable; preview not opened.")
            return None
        return cls(index, position)

    @property
    def rows(self) -> List[PreviewableRow]:
        return list(self._rows)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> PreviewableRow:
        return self._rows[self._position]

    @property
    def has_next(self) -> bool:
        return self._position < len(self._rows) - 1

    @property
    def has_previous(self) -> bool:
        return self._position > 0

    def next(self) -> PreviewableRow:
        if self.has_next:
            self._position += 1
        return self.current

    def previous(self) -> PreviewableRow:
        if self.has_previous:
            self._position -= 1
        return self.current

    def __len__(self) -> int:
        return len(self._rows)
