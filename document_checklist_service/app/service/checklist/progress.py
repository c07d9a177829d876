# Completion progress over the required rows of a checklist
import math
from typing import List

from document_checklist_service.app.models import ChecklistProgress, ChecklistSection, DocStatus

DONE_STATUSES = {DocStatus.VERIFIED, DocStatus.PENDING}
OUTSTANDING_STATUSES = {DocStatus.MISSING, DocStatus.REJECTED}


def calculate_progress(sections: List[ChecklistSection]) -> ChecklistProgress:
    required_rows = [row for section in sections for row in section.rows if row.required]
    if not required_rows:
        return ChecklistProgress(percentage=100, missing_docs=[])

    done = [row for row in required_rows if row.status in DONE_STATUSES]
    missing = [row for row in required_rows if row.status in OUTSTANDING_STATUSES]
    # Half-up rounding
    percentage = math.floor(len(done) / len(required_rows) * 100 + 0.5)
    return ChecklistProgress(percentage=percentage, missing_docs=missing)
