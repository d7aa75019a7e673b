"""Startup entry point: run the qualifier workflow once and exit."""

import os
import sys
from pathlib import Path

import structlog

from core.config import ConfigValidationError, load_config
from core.log import configure_logging
from orchestration.runner import run_workflow

logger = structlog.get_logger()


def main() -> None:
    """Entry point for the qualifier workflow.

    Exits 1 only when configuration cannot be loaded. Once the workflow
    starts, the process exits 0 whatever happened during the run.
    """
    configure_logging(os.getenv("LOG_LEVEL", "INFO"))

    # Determine candidate file (allow override via env)
    candidate_path = Path(
        os.getenv("QUALIFIER_CANDIDATE_FILE", "config/candidate.yaml")
    )

    try:
        settings, candidate = load_config(candidate_path=candidate_path)
    except ConfigValidationError as e:
        logger.error("Configuration error", error=str(e), errors=e.errors)
        sys.exit(1)

    configure_logging(settings.log_level, json_output=settings.log_json)

    run_workflow(settings, candidate)


if __name__ == "__main__":
    main()
