"""Turning API failures into readable exceptions."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Sequence

from .models import RateLimit


class ApiError(Exception):
    """An error reported by, or while talking to, the API."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _decode(body: Any) -> Any:
    if body is None:
        return None
    if isinstance(body, Mapping):
        return body
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        return json.loads(body)
    except ValueError:
        return None


def raise_for_status(
    status_code: int,
    reason: str,
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> None:
    """Raise :class:`ApiError` describing a failed response; do nothing on success."""
    if 200 <= status_code < 300:
        return

    payload = _decode(body)
    if not isinstance(payload, Mapping):
        raise ApiError(f"http error: {status_code} {reason}".rstrip(), status_code)

    if status_code == 429:
        rate_limit = RateLimit.from_headers(headers or {})
        reset = rate_limit.reset if rate_limit else datetime.fromtimestamp(0, tz=timezone.utc)
        moment = reset.astimezone().strftime("%H:%M:%S")
        raise ApiError(f"Rate limit exceeded (Reset time: {moment})", status_code)

    title = payload.get("title", "")
    detail = payload.get("detail", "")
    raise ApiError(f"server error: {status_code} {title} | {detail}", status_code)


def raise_partial_error(errors: Optional[Sequence[Mapping[str, Any]]]) -> None:
    """Raise :class:`ApiError` for the first partial error, if there is any."""
    if not errors:
        return
    first = errors[0]
    raise ApiError(f"partial error: {first.get('title', '')} {first.get('detail', '')}")