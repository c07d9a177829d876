# API Router for checklist projections (stateless: every request carries its own snapshot)
import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import Field

from document_checklist_service.app.models import (
    CaseChecklist,
    CaseContext,
    ChecklistRow,
    ChecklistSection,
    Document,
    OwnerRef,
    PartyContext,
    RequirementEntry,
)
from document_checklist_service.app.models.document import CamelModel
from document_checklist_service.app.observability import record_checklist_build
from document_checklist_service.app.dependencies.requirements_cache import get_requirements_cache
from document_checklist_service.app.service.checklist import adhoc, builder, history as history_ops, preview
from document_checklist_service.app.service.checklist.case_checklist import build_case_checklist
from document_checklist_service.app.service.exceptions import ConfigurationError, RequirementsUnavailableError
from document_checklist_service.infrastructure.requirements_cache import RequirementsTemplateCache

logger = logging.getLogger(__name__)
router = APIRouter()

# --- Request / response models ---

class BuildChecklistRequest(CamelModel):
    template: Dict[str, List[RequirementEntry]]
    documents: List[Document] = Field(default_factory=list)
    owner: OwnerRef

class CaseChecklistRequest(CamelModel):
    case: CaseContext
    parties: List[PartyContext] = Field(default_factory=list)
    documents: List[Document] = Field(default_factory=list)
    is_exception: Optional[bool] = None

class AdHocRowsRequest(CamelModel):
    documents: List[Document] = Field(default_factory=list)
    owner: OwnerRef
    placeholders: List[ChecklistRow] = Field(default_factory=list)

class HistoryRequest(CamelModel):
    row: ChecklistRow
    documents: List[Document] = Field(default_factory=list)

class PreviewIndexRequest(CamelModel):
    rows: List[ChecklistRow]
    target: Optional[ChecklistRow] = None

class PreviewIndexResponse(CamelModel):
    rows: List[ChecklistRow]
    start_index: int


# --- API Endpoints ---

@router.post(
    "/build",
    response_model=List[ChecklistSection],
    summary="Materialize a requirement template into a checklist for one owner."
)
async def build_checklist_api(request_data: BuildChecklistRequest = Body(...)):
    sections = builder.build(request_data.template, request_data.documents, request_data.owner)
    record_checklist_build("templated", len(builder.flatten(sections)))
    return sections


@router.post(
    "/case",
    response_model=CaseChecklist,
    summary="Build the full case checklist (entity and related parties) with progress."
)
async def build_case_checklist_api(
    request_data: CaseChecklistRequest = Body(...),
    cache: RequirementsTemplateCache = Depends(get_requirements_cache),
):
    try:
        requirements = await cache.get()
    except (RequirementsUnavailableError, ConfigurationError) as e:
        logger.warning(f"Cannot build case checklist for {request_data.case.case_id}: {e}")
        raise HTTPException(status_code=503, detail="Document requirements are currently unavailable.")

    try:
        return build_case_checklist(
            requirements,
            request_data.case,
            request_data.parties,
            request_data.documents,
            is_exception=request_data.is_exception,
        )
    except ValueError as ve:
        logger.warning(f"Validation error building case checklist for {request_data.case.case_id}: {ve}")
        raise HTTPException(status_code=400, detail=str(ve))
    except Exception as e:
        logger.error(f"Error building case checklist for {request_data.case.case_id}: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to build case checklist.")


@router.post(
    "/ad-hoc",
    response_model=List[ChecklistRow],
    summary="Ad-hoc document rows for one owner, followed by pending placeholders."
)
async def assemble_ad_hoc_api(request_data: AdHocRowsRequest = Body(...)):
    rows = adhoc.assemble(request_data.documents, request_data.owner, request_data.placeholders)
    record_checklist_build("ad_hoc", len(rows))
    return rows


@router.post(
    "/history",
    response_model=List[Document],
    summary="Full version history of a checklist row, latest first."
)
async def row_history_api(request_data: HistoryRequest = Body(...)):
    return history_ops.history(request_data.row, request_data.documents)


@router.post(
    "/preview-index",
    response_model=PreviewIndexResponse,
    summary="Previewable rows and the position of the selected row (-1 when not previewable)."
)
async def preview_index_api(request_data: PreviewIndexRequest = Body(...)):
    index = preview.build_index(request_data.rows)
    start_index = preview.index_of(index, request_data.target) if request_data.target else (0 if index else -1)
    return PreviewIndexResponse(rows=index, start_index=start_index)
