"""Central configuration for the Growth Partner intake wizard.

Values are read once at import time from the environment (``.env`` files are
loaded through ``python-dotenv``). Streamlit secrets take precedence for the
hand-off destination so deployments can keep the business number out of the
repository. Invalid values emit a ``RuntimeWarning`` and fall back to the
defaults below.
"""

import logging
import os
import warnings
from typing import Mapping

import streamlit as st
from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)


DEFAULT_DESTINATION_NUMBER = "5511988600997"
DEFAULT_MESSAGE_TITLE = "Growth Partner inscrição"
DEFAULT_AUTO_CONFIRM_DELAY_MS = 250
DEFAULT_HANDOFF_BASE_URL = "https://wa.me"

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "on")
_FALSY_ENV_VALUES: tuple[str, ...] = ("0", "false", "no", "off")


def _is_truthy_flag(value: str | None) -> bool:
    """Return ``True`` when ``value`` matches a truthy environment token."""

    if value is None:
        return False
    return value.strip().lower() in _TRUTHY_ENV_VALUES


def _normalise_bool(value: object | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUTHY_ENV_VALUES:
            return True
        if lowered in _FALSY_ENV_VALUES:
            return False
    return default


def _parse_delay_ms(value: object | None, *, env_var: str, default: int) -> int:
    """Return a non-negative millisecond delay parsed from ``value``."""

    if value is None:
        return default
    if isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return default
        try:
            parsed = int(float(candidate))
        except ValueError:
            warnings.warn(
                "%s is not a number; ignoring %s" % (candidate, env_var),
                RuntimeWarning,
            )
            return default
    elif isinstance(value, (int, float)):
        parsed = int(value)
    else:
        warnings.warn(
            "Unsupported %s value '%s'; using default delay." % (env_var, value),
            RuntimeWarning,
        )
        return default
    if parsed < 0:
        warnings.warn(
            "%s must not be negative; using default delay." % env_var,
            RuntimeWarning,
        )
        return default
    return parsed


def normalise_destination_number(value: object | None, *, default: str = DEFAULT_DESTINATION_NUMBER) -> str:
    """Return ``value`` as a bare digit string usable in a ``wa.me`` link.

    Spaces, dashes, parentheses and a leading ``+`` are tolerated and removed.
    Anything else falls back to ``default`` with a warning.
    """

    if value is None:
        return default
    candidate = str(value).strip()
    if not candidate:
        return default
    cleaned = candidate.lstrip("+")
    for separator in (" ", "-", "(", ")", "."):
        cleaned = cleaned.replace(separator, "")
    if not cleaned.isdigit():
        warnings.warn(
            "Destination number '%s' contains non-digit characters; using default." % candidate,
            RuntimeWarning,
        )
        return default
    return cleaned


def _coerce_secret_value(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value).strip()


def get_destination_number() -> str:
    """Return the hand-off destination from secrets, environment or default."""

    # 1. Streamlit secrets (top-level key)
    try:
        direct_secret = st.secrets["LEADFORM_DESTINATION_NUMBER"]
    except Exception:
        direct_secret = None
    raw = _coerce_secret_value(direct_secret)
    if raw:
        return normalise_destination_number(raw)

    # 2. Streamlit secrets (``leadform`` section)
    try:
        section = st.secrets["leadform"]
    except Exception:
        section = None
    if isinstance(section, Mapping):
        section_value = _coerce_secret_value(section.get("destination_number"))
        if section_value:
            return normalise_destination_number(section_value)

    # 3. Environment variable fallback
    return normalise_destination_number(os.getenv("LEADFORM_DESTINATION_NUMBER"))


def debug_payloads_enabled() -> bool:
    """Return ``True`` when ``LEADFORM_DEBUG`` is set to a truthy token."""

    return _is_truthy_flag(os.getenv("LEADFORM_DEBUG"))


MESSAGE_TITLE = os.getenv("LEADFORM_MESSAGE_TITLE", "").strip() or DEFAULT_MESSAGE_TITLE
AUTO_CONFIRM_DELAY_MS = _parse_delay_ms(
    os.getenv("LEADFORM_AUTO_CONFIRM_DELAY_MS"),
    env_var="LEADFORM_AUTO_CONFIRM_DELAY_MS",
    default=DEFAULT_AUTO_CONFIRM_DELAY_MS,
)
AUTO_CONFIRM_DELAY_SECONDS = AUTO_CONFIRM_DELAY_MS / 1000.0
HANDOFF_BASE_URL = (os.getenv("LEADFORM_HANDOFF_BASE_URL", "").strip() or DEFAULT_HANDOFF_BASE_URL).rstrip("/")
OPEN_HANDOFF_IN_NEW_TAB = _normalise_bool(os.getenv("LEADFORM_OPEN_IN_NEW_TAB"), default=True)
DEBUG_PAYLOADS = debug_payloads_enabled()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


__all__ = [
    "AUTO_CONFIRM_DELAY_MS",
    "AUTO_CONFIRM_DELAY_SECONDS",
    "DEBUG_PAYLOADS",
    "DEFAULT_AUTO_CONFIRM_DELAY_MS",
    "DEFAULT_DESTINATION_NUMBER",
    "DEFAULT_HANDOFF_BASE_URL",
    "DEFAULT_MESSAGE_TITLE",
    "HANDOFF_BASE_URL",
    "LOG_LEVEL",
    "MESSAGE_TITLE",
    "OPEN_HANDOFF_IN_NEW_TAB",
    "debug_payloads_enabled",
    "get_destination_number",
    "normalise_destination_number",
]
