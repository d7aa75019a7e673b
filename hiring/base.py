"""Per-stage outcome type shared by the workflow stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StageOutcome(Generic[T]):
    """Result of one workflow stage: a value on success, an error otherwise."""

    stage: str
    success: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, stage: str, value: T) -> StageOutcome[T]:
        return cls(stage=stage, success=True, value=value)

    @classmethod
    def fail(cls, stage: str, error: str, value: T | None = None) -> StageOutcome[T]:
        return cls(stage=stage, success=False, value=value, error=error)
