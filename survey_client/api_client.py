# survey_client/api_client.py

import logging

import requests

from survey_client.submission import SurveySubmission

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:4000"


class SurveyClientError(Exception):
    pass


def _error_message(response, fallback):
    # Prefer the server's {"error": ...} message; fall back when the body is not JSON
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and body.get("error"):
        return body["error"]
    return fallback


class SurveyClient:
    """Talks to the survey API and keeps the bearer token between calls."""

    def __init__(self, base_url=DEFAULT_API_URL, token=None, timeout=10, session=None):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path):
        return f"{self.base_url}{path}"

    def _auth_headers(self):
        # No header at all without a token, so the server reports it as missing
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _authenticate(self, path, email, password, fallback):
        response = self.session.post(
            self._url(path),
            json={"email": email, "password": password},
            timeout=self.timeout,
        )
        try:
            token = response.json().get("token")
        except (ValueError, AttributeError):
            token = None
        if not token:
            raise SurveyClientError(_error_message(response, fallback))
        self.token = token
        return token

    def login(self, email, password):
        return self._authenticate("/auth/login", email, password, "Login failed")

    def signup(self, email, password):
        return self._authenticate("/auth/signup", email, password, "Signup failed")

    def logout(self):
        self.token = None

    def submit(self, submission: SurveySubmission):
        response = self.session.post(
            self._url("/survey"),
            json=submission.to_payload(),
            headers=self._auth_headers(),
            timeout=self.timeout,
        )
        if not response.ok:
            message = _error_message(response, "Failed to submit survey")
            logger.warning(f"Survey submission failed ({response.status_code}): {message}")
            raise SurveyClientError(message)
        return response.json()

    def list_responses(self):
        if not self.token:
            return []
        response = self.session.get(
            self._url("/survey"),
            headers=self._auth_headers(),
            timeout=self.timeout,
        )
        if not response.ok:
            raise SurveyClientError(_error_message(response, "Failed to load responses"))
        return response.json()
