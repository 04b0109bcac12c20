from unittest.mock import MagicMock

import pytest

from survey_client.api_client import SurveyClient, SurveyClientError
from survey_client.submission import SurveySubmission


def fake_response(status_code=200, body=None, invalid_json=False):
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if invalid_json:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def client(session):
    return SurveyClient("http://api.test/", session=session, timeout=5)


def test_login_stores_token(client, session):
    session.post.return_value = fake_response(body={"token": "T1"})
    assert client.login("a@x.com", "pw123") == "T1"
    assert client.token == "T1"
    session.post.assert_called_once_with(
        "http://api.test/auth/login",
        json={"email": "a@x.com", "password": "pw123"},
        timeout=5,
    )


def test_signup_surfaces_server_error(client, session):
    session.post.return_value = fake_response(400, {"error": "User already exists"})
    with pytest.raises(SurveyClientError, match="User already exists"):
        client.signup("a@x.com", "pw123")
    assert client.token is None


def test_login_falls_back_on_unparseable_body(client, session):
    session.post.return_value = fake_response(502, invalid_json=True)
    with pytest.raises(SurveyClientError, match="Login failed"):
        client.login("a@x.com", "pw123")


def test_submit_sends_bearer_token(client, session):
    client.token = "T1"
    session.post.return_value = fake_response(body={"message": "Response saved"})
    submission = SurveySubmission(question="Intake", description="", answer="{}")

    assert client.submit(submission) == {"message": "Response saved"}
    session.post.assert_called_once_with(
        "http://api.test/survey",
        json={"question": "Intake", "description": "", "answer": "{}"},
        headers={"Authorization": "Bearer T1"},
        timeout=5,
    )


def test_submit_failure_uses_server_message_or_fallback(client, session):
    client.token = "expired"
    submission = SurveySubmission(question="Intake", description="", answer="{}")

    session.post.return_value = fake_response(403, {"error": "Invalid token"})
    with pytest.raises(SurveyClientError, match="Invalid token"):
        client.submit(submission)

    session.post.return_value = fake_response(500, invalid_json=True)
    with pytest.raises(SurveyClientError, match="Failed to submit survey"):
        client.submit(submission)


def test_list_responses(client, session):
    rows = [{"id": 1, "question": "Intake", "description": "", "answer": "{}"}]
    client.token = "T1"
    session.get.return_value = fake_response(body=rows)
    assert client.list_responses() == rows
    session.get.assert_called_once_with(
        "http://api.test/survey",
        headers={"Authorization": "Bearer T1"},
        timeout=5,
    )


def test_list_without_token_skips_request(client, session):
    assert client.list_responses() == []
    session.get.assert_not_called()


def test_logout_forgets_token(client):
    client.token = "T1"
    client.logout()
    assert client.token is None


def test_submit_without_token_sends_no_authorization_header(client, session):
    session.post.return_value = fake_response(401, {"error": "Missing token"})
    submission = SurveySubmission(question="Intake", description="", answer="{}")

    with pytest.raises(SurveyClientError, match="Missing token"):
        client.submit(submission)
    assert session.post.call_args.kwargs["headers"] == {}
