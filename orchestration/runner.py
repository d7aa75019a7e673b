"""Workflow runner: Register -> Select answer -> Submit."""

from __future__ import annotations

import time
from contextlib import nullcontext
from pathlib import Path
from typing import Any

import structlog

from core.config import Settings, load_config
from core.context import RunContext, RunState
from hiring.http_client import HttpClient
from hiring.registrar import REGISTRATION_URL, register_webhook
from hiring.selector import ANSWER_B, is_even_registration, select_answer
from hiring.submitter import submit_solution
from schemas.hiring import CandidateIdentity

logger = structlog.get_logger()


def _execute(
    ctx: RunContext,
    settings: Settings,
    candidate: CandidateIdentity,
    client: HttpClient,
) -> None:
    """Run the three stages in order, updating ``ctx`` as they complete."""
    # Stage 1: Register
    ctx.start_stage("register")
    registration = register_webhook(
        client, candidate, settings.registration_url or REGISTRATION_URL
    )
    if not registration.success or registration.value is None:
        ctx.complete_stage("register", errors=[registration.error or "unknown"], status="failed")
        ctx.advance(RunState.FAILED)
        ctx.error = registration.error
        logger.error("Failed to register webhook or missing response fields.")
        return

    ctx.complete_stage("register")
    ctx.webhook_url = registration.value.webhook_url
    ctx.advance(RunState.REGISTERED)

    # Stage 2: Select answer
    ctx.start_stage("select_answer")
    if is_even_registration(candidate.registration_number):
        final_query = select_answer(candidate.registration_number)
    else:
        # Override is only read for odd numbers
        odd_answer = settings.odd_answer_override() or ANSWER_B
        final_query = select_answer(candidate.registration_number, odd_answer=odd_answer)
    ctx.final_query = final_query
    ctx.complete_stage("select_answer")
    ctx.advance(RunState.ANSWER_COMPUTED)
    logger.info("Computed SQL query", final_query=final_query)

    # Stage 3: Submit
    ctx.start_stage("submit")
    submission = submit_solution(
        client, registration.value, final_query, auth_scheme=settings.auth_scheme
    )
    ctx.submission_response = submission.value
    if submission.success:
        ctx.complete_stage("submit")
    else:
        ctx.complete_stage("submit", errors=[submission.error or "unknown"], status="failed")
    ctx.advance(RunState.SUBMITTED)
    logger.info("Submission completed.", delivered=submission.success)


def run_workflow(
    settings: Settings | None = None,
    candidate: CandidateIdentity | None = None,
    candidate_path: Path | None = None,
    client: HttpClient | None = None,
    run_id: str | None = None,
) -> RunContext:
    """Run the qualifier workflow once.

    Never raises once the run has booted: every failure is logged and
    recorded on the returned context.

    Args:
        settings: Optional pre-loaded settings
        candidate: Optional pre-loaded candidate (requires settings too)
        candidate_path: Path to candidate YAML (if candidate not provided)
        client: Optional open HttpClient; one is created and closed otherwise
        run_id: Optional explicit run ID

    Returns:
        RunContext with final state and stage logs
    """
    run_start = time.monotonic()

    if settings is None or candidate is None:
        settings, candidate = load_config(candidate_path, settings)

    ctx = RunContext.boot(run_id)
    structlog.contextvars.bind_contextvars(run_id=ctx.run_id)

    try:
        logger.info("Starting qualifier workflow...", reg_no=candidate.registration_number)
        client_cm = (
            nullcontext(client)
            if client is not None
            else HttpClient(timeout=settings.default_timeout)
        )
        with client_cm as http:
            _execute(ctx, settings, candidate, http)

    except Exception as e:
        logger.exception("An error occurred during the hiring workflow")
        ctx.record_error(f"{type(e).__name__}: {e}")

    finally:
        ctx.complete_run()
        logger.info(
            "Qualifier workflow finished",
            state=ctx.state.value,
            succeeded=ctx.succeeded,
            duration=round(time.monotonic() - run_start, 3),
        )
        structlog.contextvars.unbind_contextvars("run_id")

    return ctx


def get_run_results(ctx: RunContext) -> dict[str, Any]:
    """Get detailed results from a run. Useful for inspection and debugging."""
    return {
        "summary": ctx.summary(),
        "final_query": ctx.final_query,
        "submission_response": ctx.submission_response,
        "stage_errors": {
            log.stage: log.errors for log in ctx.stage_logs if log.errors
        },
    }
