# Resolves the authoritative ("current") version of one document lineage
import logging
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional, Tuple

from document_checklist_service.app.models import Document

logger = logging.getLogger(__name__)


def sort_versions(records: Iterable[Document]) -> List[Document]:
    """Returns a new list of records ordered latest version first."""
    return sorted(records, key=lambda record: record.version, reverse=True)


def resolve(records: List[Document]) -> Optional[Document]:
    """
    Picks the current version among all records of a single lineage
    (same owner and document type).

    The highest-versioned record flagged `is_current_for_case` wins; when no
    record is flagged the highest version overall is returned. An empty input
    resolves to None. The input list is not modified.
    """
    if not records:
        return None

    ordered = sort_versions(records)
    flagged = [record for record in ordered if record.is_current_for_case]
    if len(flagged) > 1:
        logger.warning(
            f"Lineage {ordered[0].lineage_key} has {len(flagged)} records flagged as current "
            f"(versions {[record.version for record in flagged]}); using version {flagged[0].version}."
        )
    if flagged:
        return flagged[0]
    return ordered[0]


def group_by_lineage(documents: Iterable[Document]) -> Dict[Tuple[str, str], List[Document]]:
    """
    Groups a flat document collection by lineage key. Groups keep the order in
    which their lineage was first seen; versions inside each group are sorted
    latest first.
    """
    grouped: Dict[Tuple[str, str], List[Document]] = OrderedDict()
    for document in documents or []:
        grouped.setdefault(document.lineage_key, []).append(document)
    for key, versions in grouped.items():
        grouped[key] = sort_versions(versions)
    return grouped
