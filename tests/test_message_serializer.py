from __future__ import annotations

import re
from urllib.parse import parse_qs, unquote, urlsplit

from models.steps import FreeTextStep
from wizard.serializer import build_handoff_url, build_message, emphasize, serialize_answers
from wizard.step_registry import WIZARD_STEPS

_FULL_ANSWERS = {
    "nome": "Ana",
    "telefone": "+55 (11) 98888-7777",
    "email": "ana@example.com",
    "instagram": "@ana",
    "infoprodutos": "0 infoprodutos",
    "assessoria": "Não, não possuo assessoria",
    "comecar_vender": "O mais breve possível",
}


def test_emphasize_wraps_in_bold_markers() -> None:
    assert emphasize("Nome") == "*Nome*"


def test_build_message_layout() -> None:
    steps = (FreeTextStep(id="a", label="Primeira"), FreeTextStep(id="b", label="Segunda"))

    message = build_message({"a": "um", "b": "dois"}, steps, title="Título")

    assert message == "*Título*\n\n*Primeira*\num\n\n*Segunda*\ndois"


def test_build_message_has_title_plus_one_block_per_step() -> None:
    message = build_message(_FULL_ANSWERS, WIZARD_STEPS, title="Growth Partner inscrição")
    blocks = message.split("\n\n")

    assert len(blocks) == len(WIZARD_STEPS) + 1
    assert blocks[0] == "*Growth Partner inscrição*"
    emphasized = re.findall(r"^\*[^*\n]+\*$", message, flags=re.MULTILINE)
    assert len(emphasized) == len(WIZARD_STEPS) + 1
    for block, step in zip(blocks[1:], WIZARD_STEPS):
        assert block == f"*{step.label}*\n{_FULL_ANSWERS[step.id]}"


def test_build_message_ignores_answer_insertion_order() -> None:
    reversed_answers = dict(reversed(list(_FULL_ANSWERS.items())))

    assert build_message(reversed_answers, WIZARD_STEPS, title="T") == build_message(
        _FULL_ANSWERS, WIZARD_STEPS, title="T"
    )


def test_build_message_tolerates_missing_answers() -> None:
    message = build_message({"nome": "Ana"}, WIZARD_STEPS, title="T")

    assert "*Telefone*\n\n\n" in message
    assert message.endswith(f"*{WIZARD_STEPS[-1].label}*\n")


def test_build_handoff_url_matches_uri_component_encoding() -> None:
    url = build_handoff_url("*Nome*\nAna & Bia (ok)!", destination="5511988600997")

    assert url == "https://wa.me/5511988600997?text=*Nome*%0AAna%20%26%20Bia%20(ok)!"


def test_build_handoff_url_encodes_non_ascii_as_utf8() -> None:
    url = build_handoff_url("inscrição", destination="1", base_url="https://wa.me/")

    assert url == "https://wa.me/1?text=inscri%C3%A7%C3%A3o"


def test_serialize_answers_round_trips_through_query_parsing() -> None:
    url = serialize_answers(
        _FULL_ANSWERS,
        WIZARD_STEPS,
        title="Growth Partner inscrição",
        destination="5511988600997",
    )
    parts = urlsplit(url)
    text = parse_qs(parts.query)["text"][0]

    assert parts.netloc == "wa.me"
    assert parts.path == "/5511988600997"
    assert text == build_message(_FULL_ANSWERS, WIZARD_STEPS, title="Growth Partner inscrição")
    assert unquote(parts.query.removeprefix("text=")) == text
