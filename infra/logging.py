"""Structured logging utilities for the intake wizard."""

from __future__ import annotations

import json
import logging
import tempfile
import time
from pathlib import Path
from typing import Any, Dict

import config as app_config

LOGGER = logging.getLogger("growth_intake")


def _redact(value: str) -> str:
    """Redact the resolved hand-off destination from a string."""

    destination = app_config.get_destination_number()
    if destination:
        value = value.replace(destination, "[redacted]")
    return value


def log_event(
    level: str,
    *,
    event: str,
    step_id: str | None = None,
    position: int | None = None,
    answer_count: int | None = None,
    payload: Dict[str, Any] | None = None,
) -> str:
    """Emit a structured log line and optionally dump payload to a temp file.

    Args:
        level: Logging level name (e.g., ``"info"``).
        event: Short event name such as ``"handoff"``.
        step_id: Optional step identifier the event relates to.
        position: Wizard position at the time of the event.
        answer_count: Number of committed answers. Answer values are never
            logged because they carry personal data.
        payload: Optional payload to dump for debugging when
            ``LEADFORM_DEBUG`` env var is truthy.

    Returns:
        Path to the dumped payload file if written, else an empty string.
    """

    record = {
        "level": level.lower(),
        "event": event,
        "step_id": step_id,
        "position": position,
        "answer_count": answer_count,
    }
    safe_record = {k: _redact(str(v)) for k, v in record.items() if v is not None}
    LOGGER.log(getattr(logging, level.upper(), logging.INFO), json.dumps(safe_record))

    if payload and app_config.debug_payloads_enabled():
        path = Path(tempfile.gettempdir()) / f"growth_intake_{int(time.time())}.json"
        path.write_text(json.dumps(payload, ensure_ascii=False, indent=2))
        return str(path)
    return ""
