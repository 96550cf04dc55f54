"""Unit tests for issue request normalization."""

from app.application.schemas import IssueCreate, IssueDelete, IssueUpdate
from app.application.schemas.issue import normalize_body


def test_normalize_body_stringifies_scalars():
    body = {"issue_text": 42, "created_by": True, "open": False}
    assert normalize_body(body) == {"issue_text": "42", "created_by": "true", "open": False}


def test_normalize_body_turns_falsy_scalars_into_empty_strings():
    body = {"issue_title": False, "issue_text": 0, "assigned_to": 0.0, "status_text": None}
    assert normalize_body(body) == {
        "issue_title": "",
        "issue_text": "",
        "assigned_to": "",
        "status_text": "",
    }


def test_normalize_body_keeps_null_open():
    assert normalize_body({"open": None}) == {"open": None}


def test_normalize_body_rejects_non_objects():
    assert normalize_body(["issue_title"]) == {}
    assert normalize_body("text") == {}


def test_create_ignores_unknown_fields():
    data = IssueCreate.model_validate(
        {"issue_title": "T", "issue_text": "x", "created_by": "me", "_id": "forged", "open": False}
    )
    assert data.has_required_fields()
    assert data.model_dump() == {
        "issue_title": "T",
        "issue_text": "x",
        "created_by": "me",
        "assigned_to": "",
        "status_text": "",
    }


def test_update_changes_only_contain_sent_fields():
    data = IssueUpdate.model_validate({"_id": "abc", "status_text": "", "open": "false"})
    assert data.id == "abc"
    assert data.changes() == {"status_text": "", "open": False}


def test_update_numeric_id_is_a_string():
    assert IssueUpdate.model_validate({"_id": 123}).id == "123"


def test_update_without_fields_has_no_changes():
    assert IssueUpdate.model_validate({"_id": "abc", "unrelated": "x"}).changes() == {}


def test_delete_reads_id():
    assert IssueDelete.model_validate({"_id": "abc"}).id == "abc"
    assert not IssueDelete.model_validate({"_id": None}).id


def test_create_with_falsy_required_fields_is_incomplete():
    data = IssueCreate.model_validate({"issue_title": False, "issue_text": 0, "created_by": "x"})
    assert not data.has_required_fields()


def test_falsy_ids_count_as_missing():
    for value in (0, False, None, ""):
        assert not IssueUpdate.model_validate({"_id": value, "issue_text": "y"}).id
        assert not IssueDelete.model_validate({"_id": value}).id


def test_update_null_open_counts_as_sent_and_reopens():
    data = IssueUpdate.model_validate({"_id": "abc", "open": None})
    assert data.changes() == {"open": True}


def test_update_null_text_field_counts_as_sent():
    data = IssueUpdate.model_validate({"_id": "abc", "assigned_to": None})
    assert data.changes() == {"assigned_to": ""}
