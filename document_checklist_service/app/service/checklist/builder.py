# Materializes a requirement template into an ordered checklist for one owner
import logging
from typing import List, Set

from document_checklist_service.app.models import (
    CategorizedRequirements,
    ChecklistRow,
    ChecklistSection,
    Document,
    OwnerRef,
)
from .rows import missing_row, row_from_document
from .version_resolver import group_by_lineage, resolve

logger = logging.getLogger(__name__)


def build(
    template: CategorizedRequirements,
    documents: List[Document],
    owner: OwnerRef,
) -> List[ChecklistSection]:
    """
    Produces one section per template category (template order) and exactly one
    row per template entry (entry order), whatever the document collection holds.

    Each entry is matched against the lineage (owner.id, entry.document_type):
    a resolved document yields a row carrying its fields and full version
    history; otherwise a Missing row is emitted. Pure function of its inputs.
    """
    grouped = group_by_lineage(documents)
    sections: List[ChecklistSection] = []
    used_ids: Set[str] = set()

    for category, entries in (template or {}).items():
        rows = []
        for entry in entries:
            versions = grouped.get((owner.id, entry.document_type), [])
            current = resolve(versions)
            if current is None:
                row = missing_row(entry, owner)
            else:
                row = row_from_document(current, versions, owner, entry=entry)
            rows.append(_with_unique_id(row, used_ids))
        sections.append(ChecklistSection(category=category, rows=rows))

    logger.debug(
        f"Built checklist for owner {owner.id}: {len(sections)} sections, "
        f"{sum(len(section.rows) for section in sections)} rows."
    )
    return sections


def flatten(sections: List[ChecklistSection]):
    """All rows of the given sections, in display order."""
    return [row for section in sections for row in section.rows]


def _with_unique_id(row: ChecklistRow, used_ids: Set[str]) -> ChecklistRow:
    # A document type listed under several categories repeats its lineage's id;
    # later occurrences get an ordinal suffix (`<id>#2`, `<id>#3`, ...).
    row_id, occurrence = row.id, 1
    while row_id in used_ids:
        occurrence += 1
        row_id = f"{row.id}#{occurrence}"
    used_ids.add(row_id)
    return row if row_id == row.id else row.model_copy(update={"id": row_id})
