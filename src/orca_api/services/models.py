"""Request bodies serialised with the ORCA server's field names."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OrcaModel(BaseModel):
    """Fields are populated by Python name and dumped under their server aliases."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class OrcaRequest(OrcaModel):
    request_number: str = Field(alias="Request_Number")


class DeleteInformation(OrcaModel):
    """Which lock(s) to release: one karte/orca UID pair, or ``Delete_Class="All"``."""

    delete_karte_uid: str | None = Field(default=None, alias="Delete_Karte_Uid")
    delete_orca_uid: str | None = Field(default=None, alias="Delete_Orca_Uid")
    delete_class: str | None = Field(default=None, alias="Delete_Class")


class LockRequest(OrcaRequest):
    """Body of ``medicalv3req7`` (lock list and unlock requests)."""

    karte_uid: str | None = Field(default=None, alias="Karte_Uid")
    delete_information: dict[str, Any] | None = Field(
        default=None, alias="Delete_Information"
    )


class PhysicianListRequest(OrcaRequest):
    """Body of ``system01_managereq``."""

    base_date: str = Field(default="", alias="Base_Date")
