# Document record as supplied by the document collaborator (flat, one record per uploaded version)
import datetime
import enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DocStatus(str, enum.Enum):
    MISSING = "Missing" # Virtual only, never persisted
    PENDING = "Pending"
    VERIFIED = "Verified"
    REJECTED = "Rejected"
    EXPIRED = "Expired"


# Legacy status labels still emitted by older upload flows
STATUS_ALIASES = {
    "Submitted": DocStatus.PENDING.value,
}


class OwnerType(str, enum.Enum):
    CASE = "CASE"
    PARTY = "PARTY"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AttributedUser(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["attributed"] = "attributed"
    user_id: Optional[str] = None
    username: Optional[str] = None
    name: str
    department: Optional[str] = None


class Unattributed(CamelModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["unattributed"] = "unattributed"


Attribution = Annotated[Union[AttributedUser, Unattributed], Field(discriminator="kind")]


def normalize_attribution(value: Any) -> Any:
    """
    Resolves the loosely typed attribution payload (plain user name, user object
    or null) into the tagged shape understood by `Attribution`.
    """
    if value is None or isinstance(value, (AttributedUser, Unattributed)):
        return value if value is not None else Unattributed()
    if isinstance(value, str):
        return AttributedUser(name=value) if value.strip() else Unattributed()
    if isinstance(value, dict):
        if "kind" in value:
            return value
        display_name = value.get("name") or value.get("username") or value.get("userId") or value.get("user_id")
        if not display_name:
            return Unattributed()
        return {**value, "name": display_name, "kind": "attributed"}
    return value


class Document(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: Optional[str] = None
    document_type: str
    original_filename: Optional[str] = None
    mime_type: Optional[str] = None
    size_in_bytes: Optional[int] = None
    status: DocStatus
    version: int
    owner_type: OwnerType = OwnerType.CASE
    owner_id: str

    uploaded_by: Attribution = Field(default_factory=Unattributed)
    uploaded_date: Optional[datetime.datetime] = None
    verified_by: Attribution = Field(default_factory=Unattributed)
    verified_date: Optional[datetime.datetime] = None

    rejection_reason: Optional[str] = None
    expiry_date: Optional[datetime.date] = None
    comments: Optional[str] = None
    is_current_for_case: bool = False
    is_ad_hoc: bool = False

    @field_validator("uploaded_by", "verified_by", mode="before")
    @classmethod
    def _normalize_attribution(cls, value: Any) -> Any:
        return normalize_attribution(value)

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value: Any) -> Any:
        if value == DocStatus.MISSING.value:
            raise ValueError("status Missing is reserved for checklist rows without an uploaded document")
        if isinstance(value, str) and value in STATUS_ALIASES:
            return STATUS_ALIASES[value]
        return value

    @property
    def lineage_key(self) -> tuple:
        return (self.owner_id, self.document_type)

    @property
    def display_name(self) -> str:
        return self.name or self.document_type
