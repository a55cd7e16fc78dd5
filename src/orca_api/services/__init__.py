"""Service objects grouping ORCA endpoints."""

from .base import Service
from .lock import LockService, UnlockState
from .physician import PhysicianService

__all__ = [
    "LockService",
    "PhysicianService",
    "Service",
    "UnlockState",
]
