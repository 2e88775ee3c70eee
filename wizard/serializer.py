"""Render committed answers into the WhatsApp hand-off message and link."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final
from urllib.parse import quote

from models.steps import Step

BOLD_MARKER: Final[str] = "*"
BLOCK_SEPARATOR: Final[str] = "\n\n"
DEFAULT_HANDOFF_BASE_URL: Final[str] = "https://wa.me"

# Characters ``encodeURIComponent`` leaves untouched besides letters and digits.
_URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"


def emphasize(text: str) -> str:
    """Wrap ``text`` in WhatsApp bold markers."""

    return f"{BOLD_MARKER}{text}{BOLD_MARKER}"


def build_message(answers: Mapping[str, str], steps: Sequence[Step], *, title: str) -> str:
    """Return the hand-off text: a bold title followed by one block per step.

    Blocks follow table order regardless of how ``answers`` was filled. A step
    without an answer renders its label over an empty line.
    """

    blocks = [f"{emphasize(step.label)}\n{answers.get(step.id, '')}" for step in steps]
    return BLOCK_SEPARATOR.join([emphasize(title), *blocks])


def build_handoff_url(message: str, *, destination: str, base_url: str = DEFAULT_HANDOFF_BASE_URL) -> str:
    """Return the ``wa.me`` deep link carrying ``message`` as its ``text`` parameter."""

    encoded = quote(message, safe=_URI_COMPONENT_SAFE)
    return f"{base_url.rstrip('/')}/{destination}?text={encoded}"


def serialize_answers(
    answers: Mapping[str, str],
    steps: Sequence[Step],
    *,
    title: str,
    destination: str,
    base_url: str = DEFAULT_HANDOFF_BASE_URL,
) -> str:
    """Build the message for ``answers`` and return its hand-off URL."""

    message = build_message(answers, steps, title=title)
    return build_handoff_url(message, destination=destination, base_url=base_url)


__all__ = [
    "BOLD_MARKER",
    "DEFAULT_HANDOFF_BASE_URL",
    "build_handoff_url",
    "build_message",
    "emphasize",
    "serialize_answers",
]
