"""ID generation and redaction utilities."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def generate_run_id() -> str:
    """Generate a unique run ID.

    Format: YYYYMMDD_HHMMSS_<short_uuid>
    """
    now = datetime.now(timezone.utc)
    short_uuid = uuid.uuid4().hex[:8]
    return f"{now.strftime('%Y%m%d_%H%M%S')}_{short_uuid}"


def mask_secret(value: str | None, visible: int = 4) -> str:
    """Mask a credential for log output.

    Keeps the last ``visible`` characters, and only when the secret is long
    enough that doing so still hides most of it.
    """
    if not value:
        return "<empty>"
    if len(value) <= visible * 3:
        return "*" * 8
    return f"{'*' * 8}{value[-visible:]}"
