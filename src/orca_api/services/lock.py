"""Lock release service (排他制御解除).

The ORCA server keeps an exclusive lock per open medical-record session.
Releasing one is a two-step exchange: the first request names the lock(s);
when the server finds a match it answers ``S40`` and waits for a second
request echoing its identifiers with ``Select_Answer="Ok"``.
"""

from __future__ import annotations

from enum import Enum
import logging
from typing import Any

from orca_api.result import Result
from orca_api.services.base import Service
from orca_api.services.models import DeleteInformation, LockRequest

logger = logging.getLogger(__name__)

API_PATH = "/api21/medicalmodv37"
REQUEST_NAME = "medicalv3req7"

#: List query found no locks; reported as an error code but not a failure.
NOT_FOUND_CODE = "E10"
#: Server matched the lock(s) and requires confirmation before deleting.
CONFIRM_CODE = "S40"
#: Lock is younger than one minute and may belong to a live terminal session.
TOO_RECENT_CODE = "E14"


class UnlockState(Enum):
    INIT = "init"
    REQUESTED = "requested"
    CONFIRM_NEEDED = "confirm_needed"
    CONFIRMED = "confirmed"
    DONE = "done"


class LockService(Service):
    """List and release the server's exclusive locks.

    Status codes are never raised: inspect the returned ``Result`` with
    ``succeeded()`` and ``message()``. ``E14`` means the lock is less than a
    minute old; send the request again after a minute if it must go.
    """

    def list(self) -> Result:
        """Return the current locks.

        The result succeeds even when no lock is held (``E10``), and
        ``lock_information`` is always a list.
        """
        req = LockRequest(request_number="00", karte_uid=self.orca_api.karte_uid)
        return Result(
            self._call(req),
            ok_codes={NOT_FOUND_CODE},
            defaults={"Lock_Information": []},
        )

    def unlock(self, karte_uid: str, orca_uid: str) -> Result:
        """Release the single lock identified by a listed karte/orca UID pair.

        Temporary data left behind by the locked session is deleted as well.
        """
        req = LockRequest(
            request_number="01",
            karte_uid=self.orca_api.karte_uid,
            delete_information=DeleteInformation(
                delete_karte_uid=karte_uid, delete_orca_uid=orca_uid
            ).to_body(),
        )
        return self._unlock(req)

    def unlock_all(self) -> Result:
        """Release every lock held on the server."""
        req = LockRequest(
            request_number="01",
            karte_uid=self.orca_api.karte_uid,
            delete_information=DeleteInformation(delete_class="All").to_body(),
        )
        return self._unlock(req)

    def _call(self, req: LockRequest | dict[str, Any]) -> dict[str, Any]:
        body = req.to_body() if isinstance(req, LockRequest) else req
        return self.orca_api.call(API_PATH, {REQUEST_NAME: body})

    def _transition(self, state: UnlockState, new: UnlockState) -> UnlockState:
        logger.debug("unlock: %s -> %s", state.value, new.value)
        return new

    def _unlock(self, req: LockRequest) -> Result:
        state = self._transition(UnlockState.INIT, UnlockState.REQUESTED)
        res = Result(self._call(req))

        if res.api_result != CONFIRM_CODE:
            if res.api_result == TOO_RECENT_CODE:
                logger.warning(
                    "Lock not released, retry after one minute: %s", res.message()
                )
            self._transition(state, UnlockState.DONE)
            return res

        state = self._transition(state, UnlockState.CONFIRM_NEEDED)
        # Echoed verbatim, nulls included.
        confirm = {
            "Request_Number": res.field("response_number"),
            "Karte_Uid": res.field("karte_uid"),
            "Orca_Uid": res.field("orca_uid"),
            "Delete_Information": res.field("delete_information"),
            "Select_Answer": "Ok",
        }
        res = Result(self._call(confirm))
        state = self._transition(state, UnlockState.CONFIRMED)
        self._transition(state, UnlockState.DONE)
        return res
