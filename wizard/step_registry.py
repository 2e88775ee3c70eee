"""Registry for intake wizard steps and their canonical order."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from core.errors import StepTableError
from models.steps import EmailStep, FreeTextStep, PhoneStep, SingleSelectStep, Step

_TEXT_PLACEHOLDER: Final[str] = "Digite sua resposta aqui..."


WIZARD_STEPS: Final[tuple[Step, ...]] = (
    FreeTextStep(
        id="nome",
        label="Nome",
        placeholder=_TEXT_PLACEHOLDER,
    ),
    PhoneStep(
        id="telefone",
        label="Telefone",
        placeholder="(DDD) 99999-9999",
    ),
    EmailStep(
        id="email",
        label="E-mail",
        placeholder="name@example.com",
    ),
    FreeTextStep(
        id="instagram",
        label="Qual seu @ do Instagram?",
        sub_label="Ex: @soupedrolaterza",
        placeholder=_TEXT_PLACEHOLDER,
    ),
    SingleSelectStep(
        id="infoprodutos",
        label="Quantos infoprodutos você tem hoje?",
        options=(
            "0 infoprodutos",
            "1 infoproduto",
            "2 ou mais infoprodutos",
        ),
    ),
    SingleSelectStep(
        id="assessoria",
        label="Você tem assessoria atualmente?",
        options=(
            "Não, não possuo assessoria",
            "Sim, já possuo assessoria",
        ),
    ),
    SingleSelectStep(
        id="comecar_vender",
        label="Quando você pretende começar a vender para sua audiência?",
        options=(
            "O mais breve possível",
            "Ainda este mês",
            "Ainda não sei",
        ),
    ),
)


def validate_step_table(steps: Sequence[Step]) -> tuple[Step, ...]:
    """Return ``steps`` as a tuple after checking the table invariants.

    Raises:
        StepTableError: If the table is empty, ids repeat, or a single-select
            step has no options.
    """

    table = tuple(steps)
    if not table:
        raise StepTableError("The step table must contain at least one step")
    seen: set[str] = set()
    for step in table:
        if step.id in seen:
            raise StepTableError(f"Duplicate step id '{step.id}'")
        seen.add(step.id)
        if isinstance(step, SingleSelectStep) and not step.options:
            raise StepTableError(f"Single-select step '{step.id}' has no options")
    return table


validate_step_table(WIZARD_STEPS)


def step_keys(steps: Sequence[Step] = WIZARD_STEPS) -> tuple[str, ...]:
    """Return step ids in canonical order."""

    return tuple(step.id for step in steps)


def get_step(key: str, steps: Sequence[Step] = WIZARD_STEPS) -> Step | None:
    """Return the step registered under ``key`` if present."""

    for step in steps:
        if step.id == key:
            return step
    return None


def step_for_position(position: int, steps: Sequence[Step] = WIZARD_STEPS) -> Step | None:
    """Return the step shown at wizard ``position`` (1-based), if any."""

    if 1 <= position <= len(steps):
        return steps[position - 1]
    return None


__all__ = [
    "WIZARD_STEPS",
    "get_step",
    "step_for_position",
    "step_keys",
    "validate_step_table",
]
