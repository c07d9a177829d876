# Ad-hoc document rows: persisted documents outside any template, plus pending placeholders
import logging
from typing import List, Optional

from document_checklist_service.app.models import ChecklistRow, Document, OwnerRef, PlaceholderRow
from .rows import row_from_document
from .version_resolver import group_by_lineage, resolve

logger = logging.getLogger(__name__)


def assemble(
    documents: List[Document],
    owner: OwnerRef,
    pending_placeholders: Optional[List[PlaceholderRow]] = None,
) -> List[ChecklistRow]:
    """
    One resolved row per distinct ad-hoc document type the owner has on record
    (first-seen order), followed by the caller's pending placeholders in
    creation order.

    Placeholders are read, never modified or pruned here; a placeholder whose
    type was just uploaded coexists with the persisted row until the caller
    removes it.
    """
    ad_hoc_documents = [
        document for document in documents or []
        if document.owner_id == owner.id and document.is_ad_hoc
    ]
    rows: List[ChecklistRow] = []
    for versions in group_by_lineage(ad_hoc_documents).values():
        current = resolve(versions)
        if current is not None:
            rows.append(row_from_document(current, versions, owner, is_ad_hoc=True))

    placeholders = list(pending_placeholders or [])
    logger.debug(
        f"Assembled {len(rows)} ad-hoc rows and {len(placeholders)} placeholders for owner {owner.id}."
    )
    return rows + placeholders
