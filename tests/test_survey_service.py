import json

import pytest

from survey_backend import db
from survey_backend.database.models import SurveyResponse
from survey_backend.errors import AuthError, StorageError, ValidationError


ANSWER = json.dumps({"meta": {"fullName": "Jane", "age": "40"}})


@pytest.fixture
def token(auth_service):
    return auth_service.signup("a@x.com", "pw123").value


def test_submit_then_list_round_trip(survey_service, token):
    result = survey_service.submit(token, "Intake", "", ANSWER)
    assert result.ok
    assert result.value == "Response saved"

    listed = survey_service.list(token)
    assert listed.ok
    assert len(listed.value) == 1
    row = listed.value[0]
    assert set(row) == {"id", "question", "description", "answer"}
    assert (row["question"], row["description"], row["answer"]) == ("Intake", "", ANSWER)


def test_answer_is_stored_verbatim(survey_service, token):
    odd = '<b>not json</b> {"meta": '
    assert survey_service.submit(token, "Odd", "desc with <script>", odd).ok
    row = survey_service.list(token).value[0]
    assert row["answer"] == odd
    assert row["description"] == "desc with <script>"


def test_list_is_in_insertion_order(survey_service, token):
    for title in ("first", "second", "third"):
        assert survey_service.submit(token, title, "", "{}").ok
    titles = [row["question"] for row in survey_service.list(token).value]
    assert titles == ["first", "second", "third"]


def test_users_only_see_their_own_rows(survey_service, auth_service, token):
    other = auth_service.signup("b@x.com", "pw456").value
    survey_service.submit(token, "mine", "", "{}")
    survey_service.submit(other, "theirs", "", "{}")

    assert [r["question"] for r in survey_service.list(token).value] == ["mine"]
    assert [r["question"] for r in survey_service.list(other).value] == ["theirs"]


def test_submit_without_token_touches_nothing(survey_service):
    result = survey_service.submit(None, "Intake", "", ANSWER)
    assert isinstance(result.error, AuthError)
    assert result.error.status_code == 401
    assert db.session.query(SurveyResponse).count() == 0


def test_submit_with_expired_token_touches_nothing(survey_service, services, token):
    user_id = survey_service.auth_service.verify_token(token).value["id"]
    expired = services.tokens.generate_token(user_id, "a@x.com", expires_in=-10)
    result = survey_service.submit(expired, "Intake", "", ANSWER)
    assert isinstance(result.error, AuthError)
    assert result.error.status_code == 403
    assert db.session.query(SurveyResponse).count() == 0


def test_list_with_invalid_token(survey_service):
    result = survey_service.list("not.a.token")
    assert result.error.status_code == 403


def test_missing_description_defaults_to_empty(survey_service, token):
    assert survey_service.submit(token, "Intake", None, "{}").ok
    assert survey_service.list(token).value[0]["description"] == ""


def test_non_string_payload_is_rejected(survey_service, token):
    result = survey_service.submit(token, "Intake", "", {"meta": {}})
    assert isinstance(result.error, ValidationError)
    assert db.session.query(SurveyResponse).count() == 0


def test_storage_failure_is_generic(survey_service, token, monkeypatch):
    def boom(*args, **kwargs):
        raise StorageError()

    monkeypatch.setattr(survey_service.response_store, "add_response", boom)
    result = survey_service.submit(token, "Intake", "", ANSWER)
    assert isinstance(result.error, StorageError)
    assert result.error.status_code == 500
    assert result.error.to_dict() == {"error": "Internal server error"}
