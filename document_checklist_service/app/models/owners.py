# Owner identity models used to stamp derived checklist rows
from typing import List, Optional

from pydantic import Field

from .document import CamelModel, OwnerType


class OwnerRef(CamelModel):
    id: str
    name: str
    owner_type: OwnerType = OwnerType.CASE


class CaseContext(CamelModel):
    case_id: str
    entity_name: str
    entity_type: str
    risk_level: Optional[str] = None # High, Medium, Low
    workflow_stage: Optional[str] = None
    is_exception: Optional[bool] = None # Manual override when set
    exception_reason: Optional[str] = None
    total_exposure: Optional[float] = None
    related_party_ids: List[str] = Field(default_factory=list)

    def as_owner(self) -> OwnerRef:
        return OwnerRef(id=self.case_id, name=self.entity_name, owner_type=OwnerType.CASE)


class PartyContext(CamelModel):
    party_id: str
    name: str
    residency_status: Optional[str] = None

    def as_owner(self) -> OwnerRef:
        return OwnerRef(id=self.party_id, name=self.name, owner_type=OwnerType.PARTY)
