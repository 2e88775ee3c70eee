"""Custom exception types for the intake wizard."""

from __future__ import annotations


class LeadFormError(Exception):
    """Base exception for intake wizard configuration issues."""


class StepTableError(LeadFormError, ValueError):
    """Raised when a step definition table violates its structural rules."""


class UnknownCountryError(LeadFormError, KeyError):
    """Raised when a country lookup uses an ISO code missing from the directory."""

    def __init__(self, iso_code: str) -> None:
        super().__init__(iso_code)
        self.iso_code = iso_code

    def __str__(self) -> str:
        return f"Unknown country code: {self.iso_code!r}"
