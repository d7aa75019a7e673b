"""Core infrastructure: config, run context, logging, and utilities."""

from core.config import ConfigValidationError, Settings, load_config
from core.context import RunContext, RunState
from core.ids import generate_run_id, mask_secret
from core.log import configure_logging

__all__ = [
    "Settings",
    "load_config",
    "ConfigValidationError",
    "RunContext",
    "RunState",
    "generate_run_id",
    "mask_secret",
    "configure_logging",
]
