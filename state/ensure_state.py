"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from typing import cast

import streamlit as st

from constants.keys import StateKeys
from utils.logging_context import set_session_id
from wizard.engine import WizardEngine


logger = logging.getLogger(__name__)


def queue_handoff(url: str) -> None:
    """Hand-off opener used in the app: the layout opens the queued URL once."""

    st.session_state[StateKeys.HANDOFF_PENDING] = url


def ensure_state() -> None:
    """Initialize ``st.session_state`` with the session id and wizard engine.

    Existing keys are preserved so reruns keep the user's progress.
    """

    session_id = st.session_state.get(StateKeys.SESSION_ID)
    if not isinstance(session_id, str) or not session_id:
        session_id = uuid.uuid4().hex[:12]
        st.session_state[StateKeys.SESSION_ID] = session_id
    set_session_id(session_id)

    engine = st.session_state.get(StateKeys.WIZARD_ENGINE)
    if not isinstance(engine, WizardEngine):
        st.session_state[StateKeys.WIZARD_ENGINE] = WizardEngine(opener=queue_handoff)
        logger.info("Created wizard engine for new session")


def get_engine() -> WizardEngine:
    """Return the session's engine, creating it on first access."""

    ensure_state()
    return cast(WizardEngine, st.session_state[StateKeys.WIZARD_ENGINE])


def reset_state() -> None:
    """Reset the wizard to its intro screen, keeping the session id."""

    preserve = {StateKeys.SESSION_ID}
    for key in list(st.session_state.keys()):
        if key not in preserve:
            del st.session_state[key]
    ensure_state()
