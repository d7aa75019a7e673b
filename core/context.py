"""Run context and lifecycle management."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from core.ids import generate_run_id


class RunState(str, Enum):
    """State of the qualifier workflow."""

    START = "start"
    REGISTERED = "registered"
    ANSWER_COMPUTED = "answer_computed"
    SUBMITTED = "submitted"
    FAILED = "failed"


# FAILED is only reachable while registering
ALLOWED_TRANSITIONS: dict[RunState, frozenset[RunState]] = {
    RunState.START: frozenset({RunState.REGISTERED, RunState.FAILED}),
    RunState.REGISTERED: frozenset({RunState.ANSWER_COMPUTED}),
    RunState.ANSWER_COMPUTED: frozenset({RunState.SUBMITTED}),
    RunState.SUBMITTED: frozenset(),
    RunState.FAILED: frozenset(),
}


class StageLog(BaseModel):
    """Log entry for a pipeline stage."""

    stage: str
    started_at: datetime
    completed_at: datetime | None = None
    status: str = "running"
    errors: list[str] = Field(default_factory=list)
    duration_seconds: float | None = None


class RunContext(BaseModel):
    """Context for a workflow run - travels through all stages."""

    run_id: str
    started_at: datetime
    state: RunState = RunState.START
    completed_at: datetime | None = None

    # Results
    webhook_url: str | None = None
    final_query: str | None = None
    submission_response: str | None = None
    error: str | None = None

    # Tracking
    stage_logs: list[StageLog] = Field(default_factory=list)

    @classmethod
    def boot(cls, run_id: str | None = None) -> RunContext:
        """Boot a new run context in the START state."""
        return cls(
            run_id=run_id or generate_run_id(),
            started_at=datetime.now(timezone.utc),
        )

    def advance(self, state: RunState) -> None:
        """Move to ``state``, rejecting transitions the workflow never makes."""
        if state not in ALLOWED_TRANSITIONS[self.state]:
            raise RuntimeError(
                f"Illegal run state transition: {self.state.value} -> {state.value}"
            )
        self.state = state

    def start_stage(self, stage: str) -> StageLog:
        """Record start of a stage."""
        log = StageLog(stage=stage, started_at=datetime.now(timezone.utc))
        self.stage_logs.append(log)
        return log

    def complete_stage(
        self,
        stage: str,
        errors: list[str] | None = None,
        status: str = "completed",
    ) -> None:
        """Record completion of a stage."""
        for log in self.stage_logs:
            if log.stage == stage and log.completed_at is None:
                log.completed_at = datetime.now(timezone.utc)
                log.status = status
                if errors:
                    log.errors = errors
                log.duration_seconds = (
                    log.completed_at - log.started_at
                ).total_seconds()
                break

    def get_stage(self, stage: str) -> StageLog | None:
        return next((sl for sl in self.stage_logs if sl.stage == stage), None)

    def record_error(self, error: str) -> None:
        """Record an unexpected failure; a run still registering becomes FAILED."""
        self.error = error
        if self.state is RunState.START:
            self.advance(RunState.FAILED)
        for log in self.stage_logs:
            if log.completed_at is None:
                log.errors.append(error)
                self.complete_stage(log.stage, status="failed")

    def complete_run(self) -> None:
        """Mark the run as finished, whatever state it reached."""
        self.completed_at = datetime.now(timezone.utc)

    @property
    def succeeded(self) -> bool:
        """True when the answer was submitted and nothing failed along the way."""
        if self.state is not RunState.SUBMITTED or self.error:
            return False
        submit = self.get_stage("submit")
        return submit is not None and submit.status == "completed"

    def summary(self) -> dict[str, Any]:
        """Get a summary of the run for display."""
        return {
            "run_id": self.run_id,
            "state": self.state.value,
            "succeeded": self.succeeded,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "webhook_url": self.webhook_url,
            "error": self.error,
            "stages": [
                {
                    "stage": log.stage,
                    "status": log.status,
                    "duration": log.duration_seconds,
                    "errors": len(log.errors),
                }
                for log in self.stage_logs
            ],
        }
