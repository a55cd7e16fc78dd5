"""Response envelope normalization.

The ORCA server wraps every body in a single named key and pads fixed-size
repeating groups with empty records. These helpers strip the padding and
derive snake_case accessor names from the server's field names.
"""

from __future__ import annotations

import re
from typing import Any

from orca_api.errors import EnvelopeError

_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_WORD_BOUNDARY = re.compile(r"([a-z\d])([A-Z])")


def attr_name(json_name: str) -> str:
    """Translate a server field name into its accessor name.

    ``"ApiResult"`` and ``"Api_Result"`` both become ``"api_result"``;
    ``"HTTPStatus"`` becomes ``"http_status"``.
    """
    name = _ACRONYM_BOUNDARY.sub(r"\1_\2", json_name)
    name = _WORD_BOUNDARY.sub(r"\1_\2", name)
    return name.lower()


def attr_table(body: dict[str, Any]) -> dict[str, str]:
    """Map accessor names to the body's own top-level keys."""
    return {attr_name(key): key for key in body}


def _is_empty(value: Any) -> bool:
    return isinstance(value, (dict, list, str)) and len(value) == 0


def _trim_value(value: Any) -> Any:
    if isinstance(value, dict):
        return trim_response(value)
    if isinstance(value, list):
        return _trim_list(value)
    return value


def _trim_list(items: list[Any]) -> list[Any]:
    # Only the trailing run of empties is padding; interior gaps are kept.
    kept: list[Any] = []
    found = False
    for item in reversed(items):
        if not _is_empty(item):
            found = True
        if found:
            kept.append(trim_response(item) if isinstance(item, dict) else item)
    kept.reverse()
    return kept


def trim_response(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *data* with trailing empty sequence elements removed."""
    return {key: _trim_value(value) for key, value in data.items()}


def normalize(raw: Any) -> tuple[dict[str, Any], dict[str, Any]]:
    """Trim a raw envelope and return ``(envelope, body)``.

    Raises:
        EnvelopeError: *raw* is not a mapping whose first value is the body mapping.
    """
    if not isinstance(raw, dict) or not raw:
        raise EnvelopeError(
            f"Expected a single-key JSON object, got {type(raw).__name__}",
            hint="ORCA responses look like {'<name>res': {...}}.",
        )
    envelope = trim_response(raw)
    body = next(iter(envelope.values()))
    if not isinstance(body, dict):
        raise EnvelopeError(
            f"Envelope body must be an object, got {type(body).__name__}",
        )
    return envelope, body
