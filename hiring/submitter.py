"""Submission stage: post the chosen SQL to the webhook."""

from __future__ import annotations

import structlog

from hiring.base import StageOutcome
from hiring.errors import SubmissionError
from hiring.http_client import HttpClient, PostResult
from schemas.hiring import SubmissionPayload, WebhookRegistration

logger = structlog.get_logger()

STAGE = "submit"


def authorization_header(access_token: str, auth_scheme: str = "") -> dict[str, str]:
    """Build the Authorization header; the raw token unless a scheme is set."""
    value = f"{auth_scheme} {access_token}" if auth_scheme else access_token
    return {"Authorization": value}


def _check_delivery(result: PostResult) -> str:
    if not result.success:
        raise SubmissionError(result.error or f"HTTP {result.status_code}")
    return result.text


def submit_solution(
    client: HttpClient,
    registration: WebhookRegistration,
    final_query: str,
    auth_scheme: str = "",
) -> StageOutcome[str]:
    """POST ``final_query`` to the registered webhook.

    Failures are logged and reported on the outcome, never raised. The
    outcome value is the raw response body, kept for observability only.
    """
    payload = SubmissionPayload(final_query=final_query)
    headers = authorization_header(registration.access_token, auth_scheme)

    logger.info("Submitting solution", webhook=registration.webhook_url)
    result = client.post_json(registration.webhook_url, payload.to_wire(), headers=headers)

    try:
        body = _check_delivery(result)
    except SubmissionError as e:
        logger.error(
            "Failed to submit the solution to webhook",
            webhook=registration.webhook_url,
            status_code=result.status_code,
            error=str(e),
            response=result.text or None,
        )
        return StageOutcome.fail(STAGE, str(e), value=result.text or None)

    logger.info(
        "Submission response",
        status_code=result.status_code,
        response=body,
        duration_ms=round(result.duration_ms, 1),
    )
    return StageOutcome.ok(STAGE, body)
