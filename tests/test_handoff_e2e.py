"""Full intake run from the intro screen to the WhatsApp hand-off."""

from __future__ import annotations

from typing import Any, Callable
from urllib.parse import unquote

from wizard.engine import WizardEngine
from wizard.step_registry import WIZARD_STEPS


def _complete_intake(engine: WizardEngine, clock: Any) -> None:
    engine.advance()
    engine.input("Ana")
    engine.confirm()
    engine.input("11988887777")
    engine.confirm()
    engine.input("ana@example.com")
    engine.confirm()
    engine.input("@ana")
    engine.confirm()
    engine.choose_option("0 infoprodutos")
    clock.advance(0.25)
    engine.poll()
    engine.choose_option("Não, não possuo assessoria")
    engine.confirm()
    engine.choose_option("O mais breve possível")
    clock.advance(0.25)
    engine.poll()


def test_complete_intake_opens_whatsapp_link(
    engine: WizardEngine,
    clock: Any,
    opened_urls: list[str],
) -> None:
    _complete_intake(engine, clock)

    assert engine.is_complete
    assert engine.state.position == len(WIZARD_STEPS) + 1
    assert engine.progress == 100.0
    assert len(opened_urls) == 1

    url = opened_urls[0]
    assert engine.state.handoff_url == url
    assert url.startswith("https://wa.me/5511988600997?text=")
    text = unquote(url.split("?text=", 1)[1])
    assert text.startswith("*Growth Partner inscrição*\n\n")
    assert "*Nome*\nAna" in text
    assert "*Telefone*\n+55 (11) 98888-7777" in text
    assert "*Quando você pretende começar a vender para sua audiência?*\nO mais breve possível" in text


def test_completion_screen_ignores_further_actions(
    engine: WizardEngine,
    clock: Any,
    opened_urls: list[str],
) -> None:
    _complete_intake(engine, clock)
    answers = dict(engine.state.answers)

    engine.back()
    engine.confirm()
    engine.input("mais")
    engine.advance()

    assert engine.is_complete
    assert engine.state.answers == answers
    assert len(opened_urls) == 1


def test_restart_after_handoff_allows_a_new_run(
    engine: WizardEngine,
    clock: Any,
    opened_urls: list[str],
) -> None:
    _complete_intake(engine, clock)
    engine.restart()

    assert engine.is_intro
    assert engine.state.handoff_url is None

    _complete_intake(engine, clock)
    assert len(opened_urls) == 2


def test_handoff_uses_configured_destination_and_title(
    make_engine: Callable[..., WizardEngine],
    clock: Any,
    opened_urls: list[str],
) -> None:
    engine = make_engine(
        title="Nova inscrição",
        destination="351912345678",
        base_url="https://api.whatsapp.test/",
    )
    _complete_intake(engine, clock)

    assert opened_urls[0].startswith("https://api.whatsapp.test/351912345678?text=*Nova%20inscri%C3%A7%C3%A3o*")


def test_engine_without_opener_still_completes(make_engine: Callable[..., WizardEngine], clock: Any) -> None:
    engine = make_engine(opener=None)
    _complete_intake(engine, clock)

    assert engine.is_complete
    assert engine.state.handoff_url is not None
