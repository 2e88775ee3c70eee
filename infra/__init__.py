"""Infrastructure helpers for the intake wizard."""

from __future__ import annotations

from .logging import log_event

__all__ = ["log_event"]
