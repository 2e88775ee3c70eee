from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Country(BaseModel):
    """Dial-code reference entry shown in the phone country picker.

    Attributes:
        iso_code: ISO 3166-1 alpha-2 code, unique across the directory.
        display_name: Name rendered in the picker (Portuguese).
        dial_code: International calling prefix including the leading ``+``.
        flag: Flag emoji rendered next to the phone input.
    """

    model_config = ConfigDict(frozen=True)

    iso_code: str = Field(..., pattern=r"^[A-Z]{2}$")
    display_name: str = Field(..., min_length=1)
    dial_code: str = Field(..., pattern=r"^\+\d{1,4}$")
    flag: str = ""
