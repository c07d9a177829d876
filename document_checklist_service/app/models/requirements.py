# Requirement template models (which document types a case or party must provide, by category)
from typing import Dict, List, Literal, Optional

from pydantic import AliasChoices, ConfigDict, Field

from .document import CamelModel

RequirementCategory = Literal["CUSTOMER", "BANK_MANDATORY", "BANK_NON_MANDATORY"]


class RequirementEntry(CamelModel):
    model_config = ConfigDict(frozen=True)

    # Template DTOs name the document type "name"; both spellings are accepted.
    document_type: str = Field(
        validation_alias=AliasChoices("documentType", "document_type", "name"),
        serialization_alias="documentType",
    )
    required: bool = False
    description: Optional[str] = None
    validity_months: Optional[int] = None
    category: Optional[RequirementCategory] = None


# Ordered mapping: category name -> ordered template entries
CategorizedRequirements = Dict[str, List[RequirementEntry]]


class DocumentRequirements(CamelModel):
    """Full requirement template document served by the requirements service."""
    entity_templates: Dict[str, List[RequirementEntry]] = Field(default_factory=dict)
    individual_templates: Dict[str, List[RequirementEntry]] = Field(default_factory=dict)
    risk_based_documents: Dict[str, List[RequirementEntry]] = Field(default_factory=dict)
    entity_role_mapping: Dict[str, List[str]] = Field(default_factory=dict)
