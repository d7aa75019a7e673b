"""Registration stage: exchange candidate details for a webhook and token."""

from __future__ import annotations

import structlog
from pydantic import ValidationError

from core.ids import mask_secret
from hiring.base import StageOutcome
from hiring.errors import RegistrationError
from hiring.http_client import HttpClient, PostResult
from schemas.hiring import CandidateIdentity, WebhookRegistration

logger = structlog.get_logger()

STAGE = "register"
REGISTRATION_URL = "https://bfhldevapigw.healthrx.co.in/hiring/generateWebhook/JAVA"


def parse_registration(result: PostResult) -> WebhookRegistration:
    """Turn a registration response into a WebhookRegistration.

    Raises:
        RegistrationError: On transport failure, non-2xx status, a body that
            is not a JSON object, or a missing ``webhook`` / ``accessToken``.
    """
    if not result.success:
        raise RegistrationError(result.error or f"HTTP {result.status_code}")

    try:
        body = result.json()
    except ValueError as e:
        raise RegistrationError(f"Response is not valid JSON: {e}") from e

    if not isinstance(body, dict):
        raise RegistrationError("Response body is not a JSON object")

    try:
        return WebhookRegistration.model_validate(body)
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise RegistrationError(
            f"Missing or invalid response fields: {', '.join(fields)}"
        ) from e


def register_webhook(
    client: HttpClient,
    candidate: CandidateIdentity,
    url: str = REGISTRATION_URL,
) -> StageOutcome[WebhookRegistration]:
    """POST the candidate to the registration endpoint. Never raises."""
    logger.info("Registering webhook", url=url, reg_no=candidate.registration_number)

    result = client.post_json(url, candidate.to_wire())

    try:
        registration = parse_registration(result)
    except RegistrationError as e:
        logger.error(
            "Webhook registration failed",
            url=url,
            status_code=result.status_code,
            error=str(e),
        )
        return StageOutcome.fail(STAGE, str(e))

    logger.info(
        "Webhook registered",
        webhook=registration.webhook_url,
        access_token=mask_secret(registration.access_token),
        duration_ms=round(result.duration_ms, 1),
    )
    return StageOutcome.ok(STAGE, registration)
