"""Workflow orchestration."""

from orchestration.runner import get_run_results, run_workflow

__all__ = ["run_workflow", "get_run_results"]
