# Row factories shared by the templated and ad-hoc checklist projections
from typing import List, Optional

from document_checklist_service.app.models import (
    ChecklistRow,
    DocStatus,
    Document,
    OwnerRef,
    RequirementEntry,
)
from document_checklist_service.app.models.checklist import MISSING_ROW_ID_PREFIX


def missing_row_id(owner_id: str, document_type: str) -> str:
    return f"{MISSING_ROW_ID_PREFIX}-{owner_id}-{document_type}"


def row_from_document(
    current: Document,
    versions: List[Document],
    owner: OwnerRef,
    entry: Optional[RequirementEntry] = None,
    is_ad_hoc: Optional[bool] = None,
) -> ChecklistRow:
    """Builds a row showing `current`, with the lineage's full history attached."""
    return ChecklistRow(
        id=str(current.id),
        document_id=current.id,
        name=entry.document_type if entry else current.document_type,
        display_name=current.display_name,
        required=entry.required if entry else False,
        description=entry.description if entry else None,
        validity_months=entry.validity_months if entry else None,
        category=entry.category if entry else None,
        status=current.status,
        owner_id=owner.id,
        owner_name=owner.name,
        owner_type=owner.owner_type,
        version=current.version,
        uploaded_date=current.uploaded_date,
        expiry_date=current.expiry_date,
        mime_type=current.mime_type,
        rejection_reason=current.rejection_reason,
        comments=current.comments,
        uploaded_by=current.uploaded_by,
        verified_by=current.verified_by,
        verified_date=current.verified_date,
        all_versions=list(versions),
        is_ad_hoc=current.is_ad_hoc if is_ad_hoc is None else is_ad_hoc,
    )


def missing_row(entry: RequirementEntry, owner: OwnerRef) -> ChecklistRow:
    # No version, upload date or attribution on a Missing row
    return ChecklistRow(
        id=missing_row_id(owner.id, entry.document_type),
        name=entry.document_type,
        display_name=entry.document_type,
        required=entry.required,
        description=entry.description,
        validity_months=entry.validity_months,
        category=entry.category,
        status=DocStatus.MISSING,
        owner_id=owner.id,
        owner_name=owner.name,
        owner_type=owner.owner_type,
    )
