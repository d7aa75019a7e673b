"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from schemas.hiring import CandidateIdentity

DEFAULT_CANDIDATE_PATH = Path("config/candidate.yaml")


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Candidate (override config/candidate.yaml field by field)
    candidate_name: str = ""
    candidate_reg_no: str = ""
    candidate_email: str = ""

    # Hiring API
    registration_url: str | None = None  # None → fixed hiring endpoint
    auth_scheme: str = ""  # empty → raw token in Authorization header

    # Odd registration number answer
    odd_answer: str | None = None
    odd_answer_file: Path | None = None

    # Runtime
    log_level: str = "INFO"
    log_json: bool = False

    # HTTP client defaults
    default_timeout: float = Field(default=30.0, gt=0)

    @field_validator("candidate_name", "candidate_email", "auth_scheme")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()

    def odd_answer_override(self) -> str | None:
        """Return the configured SQL for odd registration numbers, if any.

        A configured file wins over the inline value.
        """
        if self.odd_answer_file is not None:
            text = self.odd_answer_file.read_text(encoding="utf-8").strip()
            if text:
                return text
        if self.odd_answer and self.odd_answer.strip():
            return self.odd_answer.strip()
        return None


def load_candidate_file(path: Path) -> dict[str, Any]:
    """Load candidate fields from a YAML file.

    Returns an empty dict when the file does not exist.
    """
    if not path.exists():
        return {}

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigValidationError(f"Candidate file must contain a mapping: {path}")

    # Accept both `reg_no` and the wire spelling `regNo`
    fields = {
        "name": data.get("name"),
        "regNo": data.get("regNo", data.get("reg_no")),
        "email": data.get("email"),
    }

    # Unquoted 0322 loads as the octal int 210
    invalid = [k for k, v in fields.items() if v is not None and not isinstance(v, str)]
    if invalid:
        raise ConfigValidationError(
            f"Candidate fields must be quoted strings in {path}: {', '.join(invalid)}",
            errors=[
                {"loc": (k,), "msg": "value is not a string", "input": fields[k]}
                for k in invalid
            ],
        )

    return fields


def load_config(
    candidate_path: Path | None = None,
    settings: Settings | None = None,
) -> tuple[Settings, CandidateIdentity]:
    """Load all configuration.

    Environment values take precedence over the candidate YAML file.

    Returns:
        Tuple of (Settings, CandidateIdentity)

    Raises:
        ConfigValidationError: If settings are invalid or the candidate is incomplete
    """
    if settings is None:
        try:
            settings = Settings()
        except ValidationError as e:
            raise ConfigValidationError("Invalid settings", errors=e.errors()) from e

    if settings.odd_answer_file is not None and not settings.odd_answer_file.is_file():
        raise ConfigValidationError(
            f"Odd answer file not found: {settings.odd_answer_file}"
        )

    candidate_path = candidate_path or DEFAULT_CANDIDATE_PATH
    fields = load_candidate_file(candidate_path)

    overrides = {
        "name": settings.candidate_name,
        "regNo": settings.candidate_reg_no,
        "email": settings.candidate_email,
    }
    for key, value in overrides.items():
        if value:
            fields[key] = value

    try:
        candidate = CandidateIdentity.model_validate(
            {k: v for k, v in fields.items() if v is not None}
        )
    except ValidationError as e:
        raise ConfigValidationError(
            f"Incomplete candidate configuration (file: {candidate_path})",
            errors=e.errors(),
        ) from e

    return settings, candidate
