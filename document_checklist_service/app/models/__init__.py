from .document import AttributedUser, Attribution, DocStatus, Document, OwnerType, Unattributed
from .requirements import CategorizedRequirements, DocumentRequirements, RequirementEntry
from .owners import CaseContext, OwnerRef, PartyContext
from .checklist import CaseChecklist, ChecklistProgress, ChecklistRow, ChecklistSection, PlaceholderRow

__all__ = [
    "AttributedUser",
    "Attribution",
    "DocStatus",
    "Document",
    "OwnerType",
    "Unattributed",
    "CategorizedRequirements",
    "DocumentRequirements",
    "RequirementEntry",
    "CaseContext",
    "OwnerRef",
    "PartyContext",
    "CaseChecklist",
    "ChecklistProgress",
    "ChecklistRow",
    "ChecklistSection",
    "PlaceholderRow",
]
