"""Intake wizard package: step table, phone masking, engine and serializer."""

from __future__ import annotations

from .countries import COUNTRIES, DEFAULT_COUNTRY, get_country
from .country_picker import filter_countries
from .engine import WizardEngine, WizardState
from .phone import format_phone_input
from .serializer import build_handoff_url, build_message, serialize_answers
from .step_registry import WIZARD_STEPS, get_step, step_keys

__all__ = [
    "COUNTRIES",
    "DEFAULT_COUNTRY",
    "WIZARD_STEPS",
    "WizardEngine",
    "WizardState",
    "build_handoff_url",
    "build_message",
    "filter_countries",
    "format_phone_input",
    "get_country",
    "get_step",
    "serialize_answers",
    "step_keys",
]
