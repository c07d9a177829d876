# Rules deciding whether a case is handled as an exception case
# (exception cases must also provide the normally optional bank forms)
from typing import Optional

from document_checklist_service.app.config import settings
from document_checklist_service.app.models import CaseContext

COMPLEX_ENTITY_TYPES = frozenset({
    "Complex Corporation",
    "Trust Account",
    "Foreign Govt. Organization",
    "Foundation",
    "Bank",
    "Non-Profit Organization",
})

# Senior management review, compliance review
EXCEPTION_WORKFLOW_STAGES = frozenset({"STAGE-004", "STAGE-005"})


def _has_large_exposure(case: CaseContext) -> bool:
    return bool(case.total_exposure) and case.total_exposure > settings.EXCEPTION_EXPOSURE_THRESHOLD


def determine_exception_status(case: CaseContext) -> bool:
    if case.is_exception is not None:
        return case.is_exception
    return (
        case.risk_level == "High"
        or case.entity_type in COMPLEX_ENTITY_TYPES
        or _has_large_exposure(case)
        or case.workflow_stage in EXCEPTION_WORKFLOW_STAGES
    )


def get_exception_reason(case: CaseContext) -> Optional[str]:
    """Human-readable reason a case is an exception case, or None."""
    if case.exception_reason:
        return case.exception_reason
    if case.is_exception is True:
        return "Manually marked as exception case"
    if case.risk_level == "High":
        return "High risk level requires additional documentation"
    if case.entity_type in COMPLEX_ENTITY_TYPES:
        return f"{case.entity_type} requires enhanced due diligence"
    if _has_large_exposure(case):
        return "Large credit exposure requires additional approvals"
    if case.workflow_stage in EXCEPTION_WORKFLOW_STAGES:
        return "Current workflow stage requires additional documentation"
    return None
