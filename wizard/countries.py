"""Country directory used by the phone step."""

from __future__ import annotations

from typing import Final

from core.errors import UnknownCountryError
from models.country import Country

# Main markets plus the Portuguese-speaking countries; declaration order is the
# picker order and the first entry is the default selection.
COUNTRIES: Final[tuple[Country, ...]] = (
    Country(iso_code="BR", display_name="Brasil", dial_code="+55", flag="🇧🇷"),
    Country(iso_code="US", display_name="Estados Unidos", dial_code="+1", flag="🇺🇸"),
    Country(iso_code="PT", display_name="Portugal", dial_code="+351", flag="🇵🇹"),
    Country(iso_code="AO", display_name="Angola", dial_code="+244", flag="🇦🇴"),
    Country(iso_code="MZ", display_name="Moçambique", dial_code="+258", flag="🇲🇿"),
    Country(iso_code="ES", display_name="Espanha", dial_code="+34", flag="🇪🇸"),
    Country(iso_code="FR", display_name="França", dial_code="+33", flag="🇫🇷"),
    Country(iso_code="GB", display_name="Reino Unido", dial_code="+44", flag="🇬🇧"),
    Country(iso_code="DE", display_name="Alemanha", dial_code="+49", flag="🇩🇪"),
    Country(iso_code="IT", display_name="Itália", dial_code="+39", flag="🇮🇹"),
    Country(iso_code="AR", display_name="Argentina", dial_code="+54", flag="🇦🇷"),
    Country(iso_code="UY", display_name="Uruguai", dial_code="+598", flag="🇺🇾"),
    Country(iso_code="PY", display_name="Paraguai", dial_code="+595", flag="🇵🇾"),
    Country(iso_code="CL", display_name="Chile", dial_code="+56", flag="🇨🇱"),
    Country(iso_code="CA", display_name="Canadá", dial_code="+1", flag="🇨🇦"),
    Country(iso_code="AU", display_name="Austrália", dial_code="+61", flag="🇦🇺"),
    Country(iso_code="JP", display_name="Japão", dial_code="+81", flag="🇯🇵"),
    Country(iso_code="CN", display_name="China", dial_code="+86", flag="🇨🇳"),
    Country(iso_code="IN", display_name="Índia", dial_code="+91", flag="🇮🇳"),
    Country(iso_code="MX", display_name="México", dial_code="+52", flag="🇲🇽"),
)

DEFAULT_COUNTRY: Final[Country] = COUNTRIES[0]

_COUNTRY_INDEX: Final[dict[str, Country]] = {country.iso_code: country for country in COUNTRIES}

if len(_COUNTRY_INDEX) != len(COUNTRIES):
    raise ValueError("Country directory contains duplicate ISO codes")


def country_codes() -> tuple[str, ...]:
    """Return ISO codes in directory order."""

    return tuple(country.iso_code for country in COUNTRIES)


def get_country(iso_code: str) -> Country:
    """Return the directory entry for ``iso_code`` (case-insensitive).

    Raises:
        UnknownCountryError: If the code is not part of the directory.
    """

    try:
        return _COUNTRY_INDEX[iso_code.strip().upper()]
    except KeyError as exc:
        raise UnknownCountryError(iso_code) from exc


__all__ = ["COUNTRIES", "DEFAULT_COUNTRY", "country_codes", "get_country"]
