from document_checklist_service.app.models import DocStatus
from document_checklist_service.app.service.checklist.placeholders import (
    PlaceholderSet,
    create_placeholder,
    new_placeholder_id,
)


def test_create_placeholder_shape(case_owner):
    placeholder = create_placeholder("Lease Agreement", case_owner)

    assert placeholder.id.startswith("new-adhoc-")
    assert placeholder.is_placeholder is True
    assert placeholder.name == "Lease Agreement"
    assert placeholder.status == DocStatus.MISSING
    assert placeholder.is_ad_hoc is True
    assert placeholder.required is False
    assert placeholder.owner_id == case_owner.id
    assert placeholder.version is None
    assert placeholder.all_versions == []


def test_placeholder_ids_are_never_reused():
    ids = {new_placeholder_id() for _ in range(200)}

    assert len(ids) == 200


def test_placeholder_ids_do_not_collide_with_persisted_ids(case_owner, make_document):
    placeholder = create_placeholder("Passport", case_owner)
    persisted = make_document("Passport", id=42)

    assert placeholder.id != str(persisted.id)


def test_placeholder_set_keeps_creation_order(case_owner):
    pending = PlaceholderSet()
    first = pending.add("Consent Form", case_owner)
    second = pending.add("Affidavit", case_owner)

    assert [row.id for row in pending.rows] == [first.id, second.id]
    assert len(pending) == 2


def test_placeholder_set_remove_is_idempotent(case_owner):
    pending = PlaceholderSet()
    keep = pending.add("Consent Form", case_owner)
    drop = pending.add("Affidavit", case_owner)

    assert pending.remove(drop.id) is True
    after_first = list(pending.rows)
    assert pending.remove(drop.id) is False

    assert list(pending.rows) == after_first == [keep]


def test_placeholder_set_remove_unknown_id(case_owner):
    pending = PlaceholderSet()
    pending.add("Consent Form", case_owner)

    assert pending.remove("new-adhoc-does-not-exist") is False
    assert len(pending) == 1


def test_placeholder_set_rows_is_a_snapshot(case_owner):
    pending = PlaceholderSet()
    pending.add("Consent Form", case_owner)
    snapshot = pending.rows

    pending.add("Affidavit", case_owner)

    assert len(snapshot) == 1
    assert len(list(pending)) == 2
