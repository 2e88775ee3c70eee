# app.py — Growth Partner intake wizard (Streamlit entrypoint)
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from config import LOG_LEVEL  # noqa: E402
from state import get_engine  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard.content import INTRO_TITLE  # noqa: E402
from wizard.layout import render_wizard  # noqa: E402

configure_logging(level=LOG_LEVEL)

st.set_page_config(
    page_title=INTRO_TITLE,
    page_icon="📈",
    layout="centered",
    initial_sidebar_state="collapsed",
)

render_wizard(get_engine())
