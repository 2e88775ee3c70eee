"""Phone input masking for the ``telefone`` step."""

from __future__ import annotations

import re
from typing import Final

from models.country import Country

# Only Brazilian numbers get the positional ``(AA) BBBBB-CCCC`` mask.
LOCAL_MASK_COUNTRY: Final[str] = "BR"
LOCAL_MAX_DIGITS: Final[int] = 11
INTERNATIONAL_MAX_DIGITS: Final[int] = 15

_NON_DIGIT_RE = re.compile(r"[^0-9]")


def extract_digits(raw: str | None) -> str:
    """Return only the ASCII digits contained in ``raw``."""

    if not raw:
        return ""
    return _NON_DIGIT_RE.sub("", raw)


def _apply_local_mask(digits: str) -> str:
    value = digits[:LOCAL_MAX_DIGITS]
    if len(value) > 2:
        value = f"({value[:2]}) {value[2:]}"
    # The hyphen threshold is measured on the parenthesised string.
    if len(value) > 9:
        value = f"{value[:10]}-{value[10:]}"
    return value


def format_phone_input(raw: str | None, country: Country) -> str:
    """Turn raw keystrokes into the masked local part of a phone number.

    Args:
        raw: Current contents of the phone input, possibly already masked.
        country: Active country from the picker.

    Returns:
        ``(AA) BBBBB-CCCC`` style text for the local country, otherwise the
        first 15 digits without separators. Never raises; junk input simply
        yields a shorter (or empty) string.
    """

    digits = extract_digits(raw)
    if country.iso_code == LOCAL_MASK_COUNTRY:
        return _apply_local_mask(digits)
    return digits[:INTERNATIONAL_MAX_DIGITS]


def compose_phone_value(draft: str, country: Country) -> str:
    """Return the committed answer: dial code, one space, masked local part."""

    return f"{country.dial_code} {draft}"


def strip_dial_code(stored: str, country: Country) -> str:
    """Return the editable local part of a committed phone answer.

    Values that were committed under another dial code are returned unchanged.
    """

    if stored.startswith(country.dial_code):
        return stored[len(country.dial_code) :].strip()
    return stored


__all__ = [
    "INTERNATIONAL_MAX_DIGITS",
    "LOCAL_MASK_COUNTRY",
    "LOCAL_MAX_DIGITS",
    "compose_phone_value",
    "extract_digits",
    "format_phone_input",
    "strip_dial_code",
]
