"""Exception hierarchy for orca_api."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class OrcaApiError(Exception):
    """Base exception for all orca_api errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(OrcaApiError):
    """Configuration validation or resolution failed."""


class EnvelopeError(OrcaApiError):
    """Response was not a single-key JSON envelope wrapping a body mapping."""


class APIError(OrcaApiError):
    """HTTP exchange with the ORCA server failed.

    ``retryable`` is informational; orca_api itself never retries.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        retryable: bool | None = None,
        status_code: int | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.retryable = retryable
        self.status_code = status_code
        self.path = path


class FieldNotFoundError(OrcaApiError, AttributeError):
    """The server did not return the requested field for this exchange.

    Optional fields are routinely absent, so this doubles as an
    ``AttributeError``: ``getattr(result, name, default)`` and ``hasattr``
    treat it as plain absence.
    """

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        available = tuple(available)
        super().__init__(
            f"Field {name!r} not present in response",
            hint=f"Available fields: {', '.join(available)}" if available else None,
        )
        self.name = name
        self.available = available


def _walk_exception_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* and its ``__cause__``/``__context__`` chain, with cycle protection."""
    seen: set[int] = set()
    stack: list[BaseException] = [exc]
    while stack:
        cur = stack.pop()
        if id(cur) in seen:
            continue
        seen.add(id(cur))
        yield cur

        cause = cur.__cause__
        if isinstance(cause, BaseException):
            stack.append(cause)
        context = cur.__context__
        if isinstance(context, BaseException):
            stack.append(context)
