"""Hiring API data shapes.

Field names are Pythonic; aliases carry the wire spelling used by the
hiring API (``regNo``, ``webhook``, ``accessToken``, ``finalQuery``).
"""

from pydantic import Field

from schemas.base import BaseSchema, HttpUrl, NonEmptyStr, StrippedStr


class CandidateIdentity(BaseSchema):
    """Candidate details sent when registering for a webhook."""

    name: StrippedStr
    # Kept verbatim; a padded number fails suffix parsing later
    registration_number: str = Field(..., alias="regNo", min_length=1, pattern=r"\S")
    email: StrippedStr


class WebhookRegistration(BaseSchema):
    """Registration response: where to submit and the token to submit with."""

    webhook_url: HttpUrl = Field(..., alias="webhook")
    access_token: NonEmptyStr = Field(..., alias="accessToken", repr=False)


class SubmissionPayload(BaseSchema):
    """Body posted to the webhook."""

    final_query: NonEmptyStr = Field(..., alias="finalQuery")
