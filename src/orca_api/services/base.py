"""Service base class."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orca_api.client import OrcaApi


class Service:
    """A group of related ORCA endpoints sharing one client."""

    def __init__(self, orca_api: OrcaApi) -> None:
        self.orca_api = orca_api
