"""Transport layer: the ``call(path, body)`` contract and its httpx implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

import httpx

from orca_api.errors import APIError, EnvelopeError, _walk_exception_chain

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

logger = logging.getLogger(__name__)

# Server-side overload or gateway trouble; informational only.
RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({408, 429, 500, 502, 503, 504})


@runtime_checkable
class Transport(Protocol):
    """Minimal transport protocol: post one envelope, return the decoded reply."""

    def call(self, path: str, body: Mapping[str, Any]) -> dict[str, Any]:
        """POST *body* as JSON to *path* and return the decoded JSON envelope."""
        ...


def extract_status_code(exc: BaseException) -> int | None:
    """Walk the exception chain to find an HTTP status code."""
    for e in _walk_exception_chain(exc):
        response = getattr(e, "response", None)
        value = getattr(response, "status_code", None)
        if isinstance(value, int) and 100 <= value <= 599:
            return value
        value = getattr(e, "status_code", None)
        if isinstance(value, int) and 100 <= value <= 599:
            return value
    return None


def _auth_hint(status_code: int | None) -> str | None:
    if status_code in {401, 403}:
        return (
            "Check credentials (set ORCA_API_USER and ORCA_API_PASSWORD "
            "or pass Config(user=..., password=...))."
        )
    return None


def wrap_transport_error(exc: BaseException, *, path: str) -> APIError:
    """Map httpx exceptions into APIError with stable metadata."""
    if isinstance(exc, APIError):
        if exc.path is None:
            exc.path = path
        return exc

    status_code = extract_status_code(exc)
    retryable = False
    if status_code in RETRYABLE_STATUS_CODES:
        retryable = True
    elif status_code is None:
        retryable = any(
            isinstance(e, (httpx.TimeoutException, httpx.TransportError))
            for e in _walk_exception_chain(exc)
        )

    status_note = f" (status={status_code})" if status_code is not None else ""
    cause = str(exc)
    msg = f"ORCA call to {path} failed{status_note}"
    return APIError(
        f"{msg}: {cause}" if cause else msg,
        hint=_auth_hint(status_code),
        retryable=retryable,
        status_code=status_code,
        path=path,
    )


class HttpTransport:
    """Synchronous httpx transport with HTTP Basic authentication.

    Every request asks for JSON output via the ``format=json`` query parameter.
    ``transport`` is handed to ``httpx.Client`` unchanged, so tests can plug in
    an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        user: str | None = None,
        password: str | None = None,
        *,
        timeout: float = 30.0,
        verify: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        auth = httpx.BasicAuth(user, password or "") if user else None
        self._client = httpx.Client(
            base_url=base_url,
            auth=auth,
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    def call(self, path: str, body: Mapping[str, Any]) -> dict[str, Any]:
        try:
            response = self._client.post(path, params={"format": "json"}, json=body)
            logger.debug("POST %s -> %s", path, response.status_code)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise wrap_transport_error(exc, path=path) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise EnvelopeError(
                f"Response from {path} is not valid JSON",
                hint="Check that the server supports format=json for this endpoint.",
            ) from exc
        if not isinstance(data, dict):
            raise EnvelopeError(
                f"Response from {path} is not a JSON object: {type(data).__name__}"
            )
        return data

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
