"""
Pydantic schemas for the qualifier agent.

Contract-first design: these schemas define the request and response
shapes exchanged with the hiring API.
"""

from .base import BaseSchema
from .hiring import CandidateIdentity, SubmissionPayload, WebhookRegistration

__all__ = [
    "BaseSchema",
    "CandidateIdentity",
    "WebhookRegistration",
    "SubmissionPayload",
]
