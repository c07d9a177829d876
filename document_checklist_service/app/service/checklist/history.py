# Version history for a checklist row
from typing import List

from document_checklist_service.app.models import ChecklistRow, Document
from .version_resolver import sort_versions


def history(row: ChecklistRow, documents: List[Document]) -> List[Document]:
    """
    Every version of the row's lineage, latest first, whatever its status
    (rejected and expired versions stay in the audit trail).

    Rows built by the checklist projections already carry their history; rows
    without one (placeholders, rows from older clients) are looked up in
    `documents` by (row.owner_id, row.name). A row with no matching records
    yields an empty list.
    """
    if row.all_versions:
        return list(row.all_versions)
    return sort_versions(
        document for document in documents or []
        if document.owner_id == row.owner_id and document.document_type == row.name
    )
