"""Configuration: frozen Config resolved from arguments or ORCA_API_* variables."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from orca_api.errors import ConfigurationError

load_dotenv()

_ENV_VARS: dict[str, str] = {
    "base_url": "ORCA_API_URL",
    "user": "ORCA_API_USER",
    "password": "ORCA_API_PASSWORD",
    "karte_uid": "ORCA_API_KARTE_UID",
}


@dataclass(frozen=True)
class Config:
    """Immutable connection settings for an ORCA server.

    Unset fields are auto-resolved from environment variables
    (``ORCA_API_URL``, ``ORCA_API_USER``, ``ORCA_API_PASSWORD``,
    ``ORCA_API_KARTE_UID``); a ``.env`` file is honoured.

    Example:
        config = Config(base_url="https://orca.example.jp:8000", user="ormaster")
        # password is read from ORCA_API_PASSWORD
    """

    base_url: str | None = None
    user: str | None = None
    password: str | None = None
    #: Identifies this client to the server's lock bookkeeping.
    karte_uid: str | None = None
    timeout: float = 30.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Resolve unset fields from the environment and validate."""
        for attr, env_var in _ENV_VARS.items():
            if getattr(self, attr) is None:
                object.__setattr__(self, attr, os.environ.get(env_var))

        if not self.base_url:
            raise ConfigurationError(
                "base_url is required",
                hint="Set ORCA_API_URL or pass Config(base_url=...).",
            )
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"base_url must be an http(s) URL, got {self.base_url!r}",
                hint="Example: https://orca.example.jp:8000",
            )
        if self.timeout <= 0:
            raise ConfigurationError(
                f"timeout must be > 0, got {self.timeout}",
                hint="This is the per-request HTTP timeout in seconds.",
            )
        if self.password and not self.user:
            raise ConfigurationError(
                "password given without user",
                hint="Set ORCA_API_USER or pass Config(user=...).",
            )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"Config(base_url={self.base_url!r}, user={self.user!r}, "
            f"password={'[REDACTED]' if self.password else None}, "
            f"karte_uid={self.karte_uid!r})"
        )

    __repr__ = __str__
