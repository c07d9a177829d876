# Unit tests for current-version resolution
import logging

from document_checklist_service.app.service.checklist.version_resolver import (
    group_by_lineage,
    resolve,
    sort_versions,
)


def test_resolve_empty_returns_none():
    assert resolve([]) is None


def test_resolve_single_current_document(make_document):
    passport = make_document("Passport", version=1, status="Verified", is_current_for_case=True)

    assert resolve([passport]) is passport


def test_resolve_without_current_flag_picks_highest_version(make_document):
    v1 = make_document("Passport", version=1, status="Rejected")
    v2 = make_document("Passport", version=2, status="Pending")

    current = resolve([v1, v2])

    assert current is v2
    assert current.status == "Pending"


def test_resolve_current_flag_beats_higher_version(make_document):
    v1 = make_document("Passport", version=1, status="Verified", is_current_for_case=True)
    v2 = make_document("Passport", version=2, status="Pending")

    assert resolve([v2, v1]) is v1


def test_resolve_multiple_current_flags_picks_highest_flagged(make_document, caplog):
    v1 = make_document("Passport", version=1, is_current_for_case=True)
    v2 = make_document("Passport", version=2, is_current_for_case=True)
    v3 = make_document("Passport", version=3)

    with caplog.at_level(logging.WARNING):
        current = resolve([v1, v3, v2])

    assert current is v2
    assert "flagged as current" in caplog.text


def test_resolve_does_not_mutate_input(make_document):
    records = [
        make_document("Passport", version=1),
        make_document("Passport", version=3),
        make_document("Passport", version=2),
    ]
    snapshot = list(records)

    resolve(records)

    assert records == snapshot


def test_resolve_audit_report_example(make_document):
    v1 = make_document("Audit Report", version=1, status="Rejected")
    v2 = make_document("Audit Report", version=2, status="Rejected")
    v3 = make_document("Audit Report", version=3, status="Verified", is_current_for_case=True)

    assert resolve([v1, v2, v3]) is v3


def test_sort_versions_latest_first(make_document):
    records = [make_document("Passport", version=v) for v in (2, 5, 1)]

    assert [record.version for record in sort_versions(records)] == [5, 2, 1]


def test_group_by_lineage_separates_owner_and_type(make_document):
    case_passport = make_document("Passport", version=1, owner_id="CASE-1")
    case_passport_v2 = make_document("Passport", version=2, owner_id="CASE-1")
    party_passport = make_document("Passport", version=1, owner_id="PARTY-1")
    case_statement = make_document("Bank Statement", version=1, owner_id="CASE-1")

    grouped = group_by_lineage([case_passport, party_passport, case_statement, case_passport_v2])

    assert list(grouped.keys()) == [
        ("CASE-1", "Passport"),
        ("PARTY-1", "Passport"),
        ("CASE-1", "Bank Statement"),
    ]
    assert grouped[("CASE-1", "Passport")] == [case_passport_v2, case_passport]


def test_group_by_lineage_handles_none():
    assert group_by_lineage(None) == {}
