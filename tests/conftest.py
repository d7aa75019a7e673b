import json

import httpx
import pytest
import structlog

from core.config import Settings
from hiring.http_client import HttpClient
from hiring.registrar import REGISTRATION_URL
from schemas.hiring import CandidateIdentity


class StubHiringApi:
    """In-memory hiring API behind httpx.MockTransport.

    ``registration`` / ``submission`` are either an httpx.Response or a
    callable taking the request (and free to raise transport errors).
    """

    WEBHOOK_URL = "https://bfhldevapigw.healthrx.co.in/hiring/testWebhook/JAVA"
    ACCESS_TOKEN = "eyJhbGciOiJIUzI1NiJ9.eyJyZWdObyI6IjAzMjIifQ.signature"

    def __init__(self, registration=None, submission=None):
        self.registration = registration or httpx.Response(
            200, json={"webhook": self.WEBHOOK_URL, "accessToken": self.ACCESS_TOKEN}
        )
        self.submission = submission or httpx.Response(200, json={"success": True})
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == REGISTRATION_URL:
            route = self.registration
        elif str(request.url) == self.WEBHOOK_URL:
            route = self.submission
        else:
            return httpx.Response(404, text="not found")
        return route(request) if callable(route) else route

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> HttpClient:
        return HttpClient(timeout=5, transport=self.transport)

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    def submissions(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url) == self.WEBHOOK_URL]

    @staticmethod
    def connect_error(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def hiring_api():
    """Factory for StubHiringApi instances."""
    return StubHiringApi


@pytest.fixture
def stub_api() -> StubHiringApi:
    return StubHiringApi()


@pytest.fixture
def client(stub_api):
    with stub_api.client() as http:
        yield http


@pytest.fixture
def candidate() -> CandidateIdentity:
    return CandidateIdentity(
        name="John Doe", registration_number="0322", email="john@example.com"
    )


@pytest.fixture
def clean_env(monkeypatch):
    for var in (
        "CANDIDATE_NAME",
        "CANDIDATE_REG_NO",
        "CANDIDATE_EMAIL",
        "REGISTRATION_URL",
        "AUTH_SCHEME",
        "ODD_ANSWER",
        "ODD_ANSWER_FILE",
        "DEFAULT_TIMEOUT",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env) -> Settings:
    return Settings(_env_file=None)
