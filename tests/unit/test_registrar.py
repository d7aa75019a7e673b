import httpx
import pytest
from structlog.testing import capture_logs

from hiring.registrar import REGISTRATION_URL, register_webhook


def test_registration_posts_wire_identity(stub_api, client, candidate):
    outcome = register_webhook(client, candidate)

    assert outcome.success
    assert outcome.value.webhook_url == stub_api.WEBHOOK_URL
    assert outcome.value.access_token == stub_api.ACCESS_TOKEN

    (request,) = stub_api.requests
    assert str(request.url) == REGISTRATION_URL
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert stub_api.bodies() == [
        {"name": "John Doe", "regNo": "0322", "email": "john@example.com"}
    ]


def test_registration_url_is_the_fixed_hiring_endpoint():
    assert REGISTRATION_URL == "https://bfhldevapigw.healthrx.co.in/hiring/generateWebhook/JAVA"


@pytest.mark.parametrize(
    "response, expected",
    [
        (httpx.Response(200, json={"webhook": "https://x.test/hook"}), "accessToken"),
        (httpx.Response(200, json={"accessToken": "tok"}), "webhook"),
        (httpx.Response(200, json={"webhook": None, "accessToken": "tok"}), "webhook"),
        (httpx.Response(200, text="<html>oops</html>"), "not valid JSON"),
        (httpx.Response(200, json=["webhook", "accessToken"]), "not a JSON object"),
        (httpx.Response(401, json={"message": "unauthorized"}), "HTTP 401"),
    ],
)
def test_unusable_registration_response_fails(hiring_api, candidate, response, expected):
    api = hiring_api(registration=response)
    with api.client() as client:
        outcome = register_webhook(client, candidate)

    assert not outcome.success
    assert outcome.value is None
    assert expected in outcome.error


def test_transport_failure_fails_without_raising(hiring_api, candidate):
    api = hiring_api(registration=hiring_api.connect_error)
    with api.client() as client, capture_logs() as logs:
        outcome = register_webhook(client, candidate)

    assert not outcome.success
    assert "ConnectError" in outcome.error
    assert any(e["log_level"] == "error" for e in logs)


def test_access_token_is_never_logged(stub_api, client, candidate):
    with capture_logs() as logs:
        register_webhook(client, candidate)

    assert logs
    assert all(stub_api.ACCESS_TOKEN not in str(e) for e in logs)
