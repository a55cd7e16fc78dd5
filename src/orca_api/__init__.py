"""orca_api: client for the ORCA medical receipt system's JSON API.

Public API:
    - OrcaApi: client facade exposing ``lock`` and ``physician`` services
    - Config: connection settings resolved from ORCA_API_* variables
    - Result: normalized response with snake_case field access
    - HttpTransport / Transport: the HTTP seam
"""

from __future__ import annotations

import logging

from orca_api.client import OrcaApi
from orca_api.config import Config
from orca_api.errors import (
    APIError,
    ConfigurationError,
    EnvelopeError,
    FieldNotFoundError,
    OrcaApiError,
)
from orca_api.result import Result
from orca_api.services import LockService, PhysicianService, UnlockState
from orca_api.transport import HttpTransport, Transport

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("orca-api-client")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("orca_api").addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "Config",
    "ConfigurationError",
    "EnvelopeError",
    "FieldNotFoundError",
    "HttpTransport",
    "LockService",
    "OrcaApi",
    "OrcaApiError",
    "PhysicianService",
    "Result",
    "Transport",
    "UnlockState",
]
