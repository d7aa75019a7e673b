"""
Hiring API stages.

Each stage wraps a single step of the qualifier workflow:
registration (candidate → webhook + token), answer selection
(registration number → SQL) and submission (SQL → webhook).
"""

from hiring.base import StageOutcome
from hiring.errors import (
    HiringApiError,
    RegistrationError,
    RegistrationNumberError,
    SubmissionError,
)
from hiring.http_client import HttpClient, PostResult
from hiring.registrar import REGISTRATION_URL, register_webhook
from hiring.selector import ANSWER_A, ANSWER_B, select_answer
from hiring.submitter import submit_solution

__all__ = [
    "StageOutcome",
    "HiringApiError",
    "RegistrationError",
    "RegistrationNumberError",
    "SubmissionError",
    "HttpClient",
    "PostResult",
    "REGISTRATION_URL",
    "register_webhook",
    "ANSWER_A",
    "ANSWER_B",
    "select_answer",
    "submit_solution",
]
