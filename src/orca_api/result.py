"""Normalized view of one ORCA API response."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from orca_api.errors import FieldNotFoundError
from orca_api.normalize import attr_table, normalize

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_SUCCESS_RE = re.compile(r"\A0+\Z")

#: Status reported when the target is held by another session.
LOCKED_CODE = "E90"


class Result:
    """A trimmed response envelope with snake_case field access.

    Fields are looked up through a table built from the body's top-level keys,
    so ``result.field("karte_uid")``, ``result.karte_uid`` and
    ``result.get("karte_uid")`` all resolve the server's ``Karte_Uid``.

    Args:
        raw: Decoded JSON envelope as received from the server.
        ok_codes: Extra status codes counted as success, e.g. ``{"E10"}`` for
            list queries where "nothing found" is not an error.
        defaults: Body fields (server names) guaranteed present when the
            server omits them.

    Example:
        result = Result({"res": {"Api_Result": "000", "Karte_Uid": "K1"}})
        assert result.succeeded()
        assert result.karte_uid == "K1"
    """

    __slots__ = ("_attr_names", "_body", "_ok_codes", "_raw")

    def __init__(
        self,
        raw: Any,
        *,
        ok_codes: Iterable[str] = (),
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        envelope, body = normalize(raw)
        if defaults:
            body = {**defaults, **body}
            envelope = {next(iter(envelope)): body}
        self._raw = envelope
        self._body = body
        self._ok_codes = frozenset(ok_codes)
        self._attr_names = attr_table(body)

    @property
    def raw(self) -> dict[str, Any]:
        """The trimmed envelope, including its wrapping key."""
        return self._raw

    @property
    def body(self) -> dict[str, Any]:
        """The trimmed body with the server's own field names."""
        return self._body

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._attr_names)

    @property
    def api_result(self) -> str | None:
        return self.get("api_result")

    @property
    def api_result_message(self) -> str | None:
        return self.get("api_result_message")

    def succeeded(self) -> bool:
        """True for an all-zero status code or one of the extra ``ok_codes``."""
        code = self.api_result
        if not isinstance(code, str):
            return False
        return code in self._ok_codes or _SUCCESS_RE.match(code) is not None

    def locked(self) -> bool:
        """True when the target is currently locked by another session."""
        return self.api_result == LOCKED_CODE

    def message(self) -> str:
        """Return ``"<message>(<code>)"`` for display and logging."""
        return f"{self.api_result_message or ''}({self.api_result or ''})"

    def field(self, name: str) -> Any:
        """Return the body value for accessor *name*.

        Raises:
            FieldNotFoundError: The server did not return this field.
        """
        try:
            key = self._attr_names[name]
        except KeyError:
            raise FieldNotFoundError(name, self._attr_names) from None
        return self._body[key]

    def get(self, name: str, default: Any = None) -> Any:
        key = self._attr_names.get(name)
        if key is None:
            return default
        return self._body[key]

    def __contains__(self, name: object) -> bool:
        return name in self._attr_names

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.field(name)

    def __repr__(self) -> str:
        return f"Result(ok={self.succeeded()}, message={self.message()!r})"
