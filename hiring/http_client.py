"""Blocking HTTP client wrapper for JSON POSTs."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any

import httpx

JSON_CONTENT_TYPE = "application/json"


@dataclass
class PostResult:
    """Result of an HTTP POST."""

    url: str
    status_code: int
    content: bytes
    duration_ms: float
    success: bool
    error: str | None = None

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """Decode the body as JSON. Raises ValueError on malformed content."""
        return json.loads(self.content)


class HttpClient:
    """HTTP client posting JSON bodies with an explicit timeout.

    Transport failures and non-2xx responses are reported on the returned
    PostResult rather than raised. No retries.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent or "QualifierAgent/1.0"
        self.transport = transport

        self._client: httpx.Client | None = None

    def __enter__(self) -> HttpClient:
        self._client = httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            headers={"User-Agent": self.user_agent},
            transport=self.transport,
        )
        return self

    def __exit__(self, *args: Any) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def post_json(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> PostResult:
        """POST ``payload`` as JSON to ``url``."""
        if not self._client:
            raise RuntimeError("Client not initialized. Use 'with' context.")

        request_headers = {"Content-Type": JSON_CONTENT_TYPE}
        if headers:
            request_headers.update(headers)

        start_time = time.monotonic()

        try:
            response = self._client.post(url, json=payload, headers=request_headers)
            duration_ms = (time.monotonic() - start_time) * 1000

            return PostResult(
                url=url,
                status_code=response.status_code,
                content=response.content,
                duration_ms=duration_ms,
                success=response.is_success,
                error=None if response.is_success else f"HTTP {response.status_code}",
            )

        except Exception as e:
            duration_ms = (time.monotonic() - start_time) * 1000
            return PostResult(
                url=url,
                status_code=0,
                content=b"",
                duration_ms=duration_ms,
                success=False,
                error=f"{type(e).__name__}: {e}",
            )
