"""Pydantic models for the license records published by the RTÜK portal.

Field aliases carry the published JSON key names; serialise with
``model_dump(by_alias=True)`` to reproduce them.  The models are frozen:
a record is built once from a table row and never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: License type used when an internet-stream row leaves both type cells blank.
DEFAULT_INTERNET_LICENSE_TYPE: str = "İnternet"


class InternetStreamLicense(BaseModel):
    """One row of the internet broadcast (platform) license table.

    Attributes:
        id: Row sequence number; ``0`` when the label text is not numeric.
        name: Organisation title taken from the name cell's ``title`` attribute.
        url: Whitespace-joined URL text as published (may hold several URLs).
        full_name: Brand name, often empty.  Serialised as ``fullname``.
        license: License label (e.g. ``"Platform"``).
        start_date: Free-form start date, may be empty.
        end_date: Free-form end date, may be empty.
        license_type: License type with parentheses stripped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = 0
    name: str = ""
    url: str = ""
    full_name: str = Field(default="", alias="fullname")
    license: str = ""
    start_date: str = ""
    end_date: str = ""
    license_type: str = DEFAULT_INTERNET_LICENSE_TYPE


class SatelliteBroadcastingLicense(BaseModel):
    """One row of the satellite broadcasting (TV / radio) license table.

    ``license_detail`` is published under the key ``lisence_detail``; the
    spelling is part of the output format and is kept as-is.
    ``address`` is empty unless the row carries the nested address markup.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = 0
    name: str = ""
    license: str = ""
    license_type: str = ""
    license_detail: str = Field(default="", alias="lisence_detail")
    broadcast_branding: str = ""
    start_date: str = ""
    end_date: str = ""
    address: str = ""

    @property
    def is_empty(self) -> bool:
        """``True`` when name, address and id are all empty/zero."""
        return not self.name and not self.address and self.id == 0
