from abc import ABC, abstractmethod
from typing import List, Union

from document_checklist_service.app.models import (
    CaseContext,
    CategorizedRequirements,
    DocumentRequirements,
    PartyContext,
    RequirementEntry,
)

ENTITY_SECTION_CATEGORY = "Entity Documents & Forms"
LOCAL_RESIDENCY_KEY = "Singaporean/PR"
FOREIGN_RESIDENCY_KEY = "Foreigner"
HIGH_RISK = "High"

OwnerContext = Union[CaseContext, PartyContext]


class TemplateSelectionStrategy(ABC):
    @abstractmethod
    def select(
        self,
        requirements: DocumentRequirements,
        context: OwnerContext,
        is_exception: bool = False,
    ) -> CategorizedRequirements:
        """
        Selects the requirement template that applies to one owner.

        Args:
            requirements: The full template document from the requirements service.
            context: The case or party the checklist is built for.
            is_exception: Whether the case is handled as an exception case.

        Returns:
            An ordered mapping of category name to template entries.
            Example: {"Entity Documents & Forms": [RequirementEntry(document_type="Passport", required=True)]}
        """
        pass


class EntityTemplateStrategy(TemplateSelectionStrategy):
    def select(
        self,
        requirements: DocumentRequirements,
        context: OwnerContext,
        is_exception: bool = False,
    ) -> CategorizedRequirements:
        if not isinstance(context, CaseContext):
            return {}
        entries: List[RequirementEntry] = []
        for entry in requirements.entity_templates.get(context.entity_type, []):
            # Exception cases must also provide the normally optional bank forms
            if is_exception and entry.category == "BANK_NON_MANDATORY" and not entry.required:
                entry = entry.model_copy(update={"required": True})
            entries.append(entry)

        if context.risk_level == HIGH_RISK:
            entries.extend(requirements.risk_based_documents.get(HIGH_RISK, []))

        return {ENTITY_SECTION_CATEGORY: entries}


class IndividualTemplateStrategy(TemplateSelectionStrategy):
    """
    Strategy for individuals, either linked to a case as stakeholders or viewed
    on their own party profile. The template depends on residency only.
    """
    def __init__(self, category: str = None):
        self.category = category

    def select(
        self,
        requirements: DocumentRequirements,
        context: OwnerContext,
        is_exception: bool = False,
    ) -> CategorizedRequirements:
        if not isinstance(context, PartyContext):
            return {}
        template_key = LOCAL_RESIDENCY_KEY if context.residency_status == LOCAL_RESIDENCY_KEY else FOREIGN_RESIDENCY_KEY
        entries = list(requirements.individual_templates.get(template_key, []))
        return {self.category or f"Documents for {context.name}": entries}


class DefaultStrategy(TemplateSelectionStrategy):
    def select(
        self,
        requirements: DocumentRequirements,
        context: OwnerContext,
        is_exception: bool = False,
    ) -> CategorizedRequirements:
        return {}


def get_template_strategy(context: OwnerContext) -> TemplateSelectionStrategy:
    if isinstance(context, CaseContext):
        return EntityTemplateStrategy()
    elif isinstance(context, PartyContext):
        return IndividualTemplateStrategy()
    return DefaultStrategy()
