"""Client facade: one ORCA server connection plus its services."""

from __future__ import annotations

from functools import cached_property
import logging
from typing import TYPE_CHECKING, Any

from orca_api.errors import ConfigurationError
from orca_api.services.lock import LockService
from orca_api.services.physician import PhysicianService
from orca_api.transport import HttpTransport

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from orca_api.config import Config
    from orca_api.transport import Transport

logger = logging.getLogger(__name__)


class OrcaApi:
    """Entry point for calling the ORCA API.

    Args:
        transport: Anything implementing ``call(path, body)``.
        karte_uid: This client's karte UID, sent with lock requests.

    Example:
        with OrcaApi.from_config(Config()) as api:
            locks = api.lock.list()
            for entry in locks.lock_information:
                print(entry["Karte_Uid"], entry["Orca_Uid"])
    """

    def __init__(self, transport: Transport, *, karte_uid: str | None = None) -> None:
        self.transport = transport
        self.karte_uid = karte_uid

    @classmethod
    def from_config(cls, config: Config) -> OrcaApi:
        """Build a client talking HTTP to ``config.base_url``."""
        if not config.base_url:
            raise ConfigurationError(
                "Config has no base_url",
                hint="Set ORCA_API_URL or pass Config(base_url=...).",
            )
        transport = HttpTransport(
            config.base_url,
            config.user,
            config.password,
            timeout=config.timeout,
            verify=config.verify_ssl,
        )
        return cls(transport, karte_uid=config.karte_uid)

    def call(self, path: str, body: Mapping[str, Any]) -> dict[str, Any]:
        """Send one request envelope and return the raw response envelope."""
        logger.debug("ORCA request %s: %s", path, ", ".join(body))
        return self.transport.call(path, body)

    @cached_property
    def lock(self) -> LockService:
        return LockService(self)

    @cached_property
    def physician(self) -> PhysicianService:
        return PhysicianService(self)

    def close(self) -> None:
        close = getattr(self.transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> OrcaApi:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
