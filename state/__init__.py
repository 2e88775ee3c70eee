"""Session state utilities."""

from .ensure_state import ensure_state, get_engine, queue_handoff, reset_state

__all__ = ["ensure_state", "get_engine", "queue_handoff", "reset_state"]
