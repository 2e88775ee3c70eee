"""Delayed confirmation for single-select steps, driven by an injectable clock."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import itertools
import logging
import time
from typing import Callable


logger = logging.getLogger(__name__)

_TOKENS = itertools.count(1)


class ConfirmStatus(StrEnum):
    """Lifecycle of a scheduled auto-confirm."""

    PENDING = "pending"
    FIRED = "fired"
    CANCELLED = "cancelled"


@dataclass
class PendingConfirm:
    """Auto-confirm scheduled by choosing a single-select option."""

    step_id: str
    value: str
    due_at: float
    token: int = field(default_factory=lambda: next(_TOKENS))
    status: ConfirmStatus = ConfirmStatus.PENDING

    @property
    def is_pending(self) -> bool:
        return self.status is ConfirmStatus.PENDING

    def is_due(self, now: float) -> bool:
        return self.is_pending and now >= self.due_at

    def cancel(self) -> None:
        if self.is_pending:
            self.status = ConfirmStatus.CANCELLED


class AutoConfirmScheduler:
    """Single-slot, clock-driven timer for the select-then-advance behaviour.

    Scheduling a new confirm cancels whatever was pending, so at most one
    confirm can fire per selection burst. Nothing runs on its own: the owner
    calls :meth:`take_due` from its event loop.
    """

    def __init__(
        self,
        *,
        delay: float,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if delay < 0:
            msg = "delay must be >= 0"
            raise ValueError(msg)
        self.delay = delay
        self._clock = clock or time.monotonic

    def now(self) -> float:
        return self._clock()

    def schedule(self, current: PendingConfirm | None, *, step_id: str, value: str) -> PendingConfirm:
        """Cancel ``current`` and return a new pending confirm for ``value``."""

        if current is not None:
            current.cancel()
        return PendingConfirm(step_id=step_id, value=value, due_at=self._clock() + self.delay)

    def remaining(self, pending: PendingConfirm | None) -> float:
        """Return seconds left before ``pending`` fires (``0.0`` when due or idle)."""

        if pending is None or not pending.is_pending:
            return 0.0
        return max(0.0, pending.due_at - self._clock())

    def take_due(self, pending: PendingConfirm | None) -> PendingConfirm | None:
        """Mark ``pending`` as fired and return it when its delay has elapsed."""

        if pending is None or not pending.is_due(self._clock()):
            return None
        pending.status = ConfirmStatus.FIRED
        logger.debug("Auto-confirm %s fired for step '%s'", pending.token, pending.step_id)
        return pending


__all__ = ["AutoConfirmScheduler", "ConfirmStatus", "PendingConfirm"]
