# Shared fixtures for document checklist tests
import datetime
import itertools

import pytest

from document_checklist_service.app.models import Document, OwnerRef, OwnerType, RequirementEntry

CASE_ID = "CASE-2024-001"
PARTY_ID = "PARTY-001"


@pytest.fixture
def case_owner() -> OwnerRef:
    return OwnerRef(id=CASE_ID, name="Acme Holdings Pte Ltd", owner_type=OwnerType.CASE)


@pytest.fixture
def party_owner() -> OwnerRef:
    return OwnerRef(id=PARTY_ID, name="Jane Tan", owner_type=OwnerType.PARTY)


@pytest.fixture
def make_document():
    """Factory for persisted document records; ids are unique per test."""
    ids = itertools.count(1)

    def _make(
        document_type: str,
        version: int = 1,
        status: str = "Pending",
        owner_id: str = CASE_ID,
        is_current_for_case: bool = False,
        is_ad_hoc: bool = False,
        **extra,
    ) -> Document:
        return Document(
            id=extra.pop("id", next(ids)),
            document_type=document_type,
            version=version,
            status=status,
            owner_id=owner_id,
            owner_type=OwnerType.PARTY if owner_id.startswith("PARTY") else OwnerType.CASE,
            is_current_for_case=is_current_for_case,
            is_ad_hoc=is_ad_hoc,
            uploaded_date=extra.pop("uploaded_date", datetime.datetime(2024, 1, version, 9, 30, tzinfo=datetime.timezone.utc)),
            uploaded_by=extra.pop("uploaded_by", "ops.analyst"),
            **extra,
        )

    return _make


@pytest.fixture
def make_entry():
    def _make(document_type: str, required: bool = True, **extra) -> RequirementEntry:
        return RequirementEntry(document_type=document_type, required=required, **extra)

    return _make
