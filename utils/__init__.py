"""Utility helpers for the intake wizard."""

from __future__ import annotations

from .logging_context import configure_logging as configure_logging
from .logging_context import log_context as log_context
