"""Physician (doctor code) roster service."""

from __future__ import annotations

import datetime

from orca_api.result import Result
from orca_api.services.base import Service
from orca_api.services.models import PhysicianListRequest

API_PATH = "/api01rv2/system01lstv2"
REQUEST_NAME = "system01_managereq"


class PhysicianService(Service):
    def list(self, base_date: str | datetime.date = "") -> Result:
        """List doctor codes valid on *base_date* (``YYYY-mm-dd``; empty for today)."""
        if isinstance(base_date, datetime.date):
            base_date = base_date.strftime("%Y-%m-%d")
        req = PhysicianListRequest(request_number="02", base_date=base_date)
        return Result(self.orca_api.call(API_PATH, {REQUEST_NAME: req.to_body()}))
