"""Shared resilience helpers for transient catalog failures and payload guards."""

from __future__ import annotations

RETRYABLE_HTTP_STATUSES = {429, 500, 502, 503, 504}


def expect_dict(value: object, context: str) -> dict:
    if isinstance(value, dict):
        return value
    value_type = type(value).__name__
    raise ValueError(f"{context} has unexpected type '{value_type}'")


def optional_list(container: dict, key: str, context: str) -> list:
    value = container.get(key, [])
    if value is None:
        return []
    if isinstance(value, list):
        return value
    value_type = type(value).__name__
    raise ValueError(f"{context}.{key} has unexpected type '{value_type}'")


def optional_list_of_dicts(container: dict, key: str, context: str) -> list[dict]:
    values = optional_list(container, key, context)
    output: list[dict] = []
    for idx, value in enumerate(values):
        output.append(expect_dict(value, f"{context}.{key}[{idx}]"))
    return output


def retry_delay_seconds(*, attempt: int, retry_after: str | None) -> int:
    """Backoff for 0-based `attempt`, preferring a positive Retry-After header."""
    if retry_after:
        try:
            value = int(float(retry_after))
        except (TypeError, ValueError):
            value = 0
        if value > 0:
            return value
    return 2 ** (attempt + 1)
