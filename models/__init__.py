"""Data models for the intake wizard (steps and countries)."""

from .country import Country
from .steps import EmailStep, FreeTextStep, InputKind, PhoneStep, SingleSelectStep, Step

__all__ = [
    "Country",
    "EmailStep",
    "FreeTextStep",
    "InputKind",
    "PhoneStep",
    "SingleSelectStep",
    "Step",
]
