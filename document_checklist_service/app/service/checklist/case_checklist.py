# Case and party checklists: template selection + checklist materialization + progress
import logging
from typing import List, Optional

from document_checklist_service.app.models import (
    CaseChecklist,
    CaseContext,
    ChecklistSection,
    Document,
    DocumentRequirements,
    PartyContext,
)
from document_checklist_service.app.observability import tracer, record_checklist_build
from document_checklist_service.app.service.strategies.exception_rules import determine_exception_status
from document_checklist_service.app.service.strategies.template_strategies import (
    IndividualTemplateStrategy,
    get_template_strategy,
)
from .builder import build
from .progress import calculate_progress

logger = logging.getLogger(__name__)


def build_case_checklist(
    requirements: DocumentRequirements,
    case: CaseContext,
    parties: List[PartyContext],
    documents: List[Document],
    is_exception: Optional[bool] = None,
) -> CaseChecklist:
    """
    Entity section for the case followed by one section per related party, in
    the order the case links them. Links to parties that were not supplied are
    skipped. When `is_exception` is not given it is derived from the case.
    """
    with tracer.start_as_current_span("checklist.build_case") as span:
        if is_exception is None:
            is_exception = determine_exception_status(case)
        span.set_attribute("case.id", case.case_id)
        span.set_attribute("case.is_exception", is_exception)

        entity_template = get_template_strategy(case).select(requirements, case, is_exception=is_exception)
        checklist = build(entity_template, documents, case.as_owner())

        parties_by_id = {party.party_id: party for party in parties or []}
        for party_id in case.related_party_ids:
            party = parties_by_id.get(party_id)
            if party is None:
                logger.warning(f"Case {case.case_id} links party {party_id}, which was not supplied; skipping.")
                continue
            party_template = get_template_strategy(party).select(requirements, party)
            checklist.extend(build(party_template, documents, party.as_owner()))

        progress = calculate_progress(checklist)
        span.set_attribute("checklist.sections", len(checklist))
        span.set_attribute("checklist.progress", progress.percentage)
        span.add_event("CaseChecklistBuilt")

    record_checklist_build("case", sum(len(section.rows) for section in checklist))
    logger.info(f"Built case checklist for {case.case_id}: {len(checklist)} sections, {progress.percentage}% complete.")
    return CaseChecklist(checklist=checklist, progress=progress)


def build_party_checklist(
    requirements: DocumentRequirements,
    party: PartyContext,
    documents: List[Document],
) -> List[ChecklistSection]:
    with tracer.start_as_current_span("checklist.build_party") as span:
        span.set_attribute("party.id", party.party_id)
        template = IndividualTemplateStrategy(category=f"{party.name}'s Documents").select(requirements, party)
        sections = build(template, documents, party.as_owner())

    record_checklist_build("party", sum(len(section.rows) for section in sections))
    logger.info(f"Built party checklist for {party.party_id}.")
    return sections
