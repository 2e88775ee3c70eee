"""Core package for shared intake wizard primitives."""

from .errors import LeadFormError, StepTableError, UnknownCountryError

__all__ = ["LeadFormError", "StepTableError", "UnknownCountryError"]
