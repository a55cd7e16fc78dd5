"""Test helpers (small, reusable doubles).

Keep this file tiny and purpose-built: response envelopes and a scripted
transport are all the lock and physician suites need.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def envelope(name: str = "medicalv3res7", **fields: Any) -> dict[str, Any]:
    """Build a single-key response envelope from server-named fields."""
    return {name: dict(fields)}


@dataclass
class FakeTransport:
    """Transport test double replaying scripted response envelopes.

    Records every ``(path, body)`` it receives so tests can assert on the
    exact request shapes without an ORCA server.
    """

    responses: list[dict[str, Any]] = field(default_factory=list)
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    closed: bool = False

    def call(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((path, body))
        if not self.responses:
            raise AssertionError(f"Unexpected call to {path}: {body}")
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True

    @property
    def bodies(self) -> list[dict[str, Any]]:
        """Request bodies with the wrapping request name removed."""
        return [next(iter(body.values())) for _, body in self.calls]
