# View models derived by the reconciliation core; rebuilt on every pass, never persisted
import datetime
from typing import List, Optional

from pydantic import Field

from .document import Attribution, CamelModel, DocStatus, Document, OwnerType
from .requirements import RequirementCategory

MISSING_ROW_ID_PREFIX = "missing"
PLACEHOLDER_ID_PREFIX = "new-adhoc"


class ChecklistRow(CamelModel):
    id: str
    document_id: Optional[int] = None

    # Template info; `name` is the document type and therefore half of the lineage key
    name: str
    display_name: Optional[str] = None
    required: bool = False
    description: Optional[str] = None
    validity_months: Optional[int] = None
    category: Optional[RequirementCategory] = None

    status: DocStatus
    owner_id: str
    owner_name: str
    owner_type: OwnerType = OwnerType.CASE
    version: Optional[int] = None
    uploaded_date: Optional[datetime.datetime] = None
    expiry_date: Optional[datetime.date] = None
    mime_type: Optional[str] = None
    rejection_reason: Optional[str] = None
    comments: Optional[str] = None
    uploaded_by: Optional[Attribution] = None
    verified_by: Optional[Attribution] = None
    verified_date: Optional[datetime.datetime] = None

    all_versions: List[Document] = Field(default_factory=list)
    is_ad_hoc: bool = False

    @property
    def is_placeholder(self) -> bool:
        return self.id.startswith(f"{PLACEHOLDER_ID_PREFIX}-")


# Placeholders share the row shape; the alias documents intent at call sites.
PlaceholderRow = ChecklistRow


class ChecklistSection(CamelModel):
    category: str
    rows: List[ChecklistRow] = Field(default_factory=list)


class ChecklistProgress(CamelModel):
    percentage: int
    missing_docs: List[ChecklistRow] = Field(default_factory=list)


class CaseChecklist(CamelModel):
    checklist: List[ChecklistSection] = Field(default_factory=list)
    progress: ChecklistProgress
