from pathlib import Path
import sys
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Callable

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import config
from wizard.engine import WizardEngine


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def _stub_streamlit_secrets(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration lookups away from any local ``secrets.toml``."""

    monkeypatch.setattr(config, "st", SimpleNamespace(secrets={}), raising=False)
    monkeypatch.delenv("LEADFORM_DESTINATION_NUMBER", raising=False)
    yield


class ManualClock:
    """Deterministic clock for auto-confirm scheduling tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.value = start

    def __call__(self) -> float:
        return self.value

    def advance(self, delta: float) -> float:
        self.value += delta
        return self.value


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def opened_urls() -> list[str]:
    return []


@pytest.fixture()
def make_engine(clock: ManualClock, opened_urls: list[str]) -> Callable[..., WizardEngine]:
    def _factory(**overrides: object) -> WizardEngine:
        options: dict[str, object] = {
            "title": "Growth Partner inscrição",
            "destination": "5511988600997",
            "auto_confirm_delay": 0.25,
            "opener": opened_urls.append,
            "clock": clock,
        }
        options.update(overrides)
        return WizardEngine(**options)  # type: ignore[arg-type]

    return _factory


@pytest.fixture()
def engine(make_engine: Callable[..., WizardEngine]) -> WizardEngine:
    return make_engine()
