"""Step variants for the intake wizard.

Each input kind has its own frozen dataclass so callers branch on the step
type instead of probing optional fields. Only :class:`SingleSelectStep`
carries ``options``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias


class InputKind(StrEnum):
    """Enumerate the supported input widgets."""

    FREE_TEXT = "free-text"
    PHONE = "phone"
    EMAIL = "email"
    SINGLE_SELECT = "single-select"


@dataclass(frozen=True)
class _BaseStep:
    id: str
    label: str
    sub_label: str | None = None
    placeholder: str | None = None
    required: bool = True

    kind: ClassVar[InputKind]

    @property
    def display_label(self) -> str:
        """Return the label with the required marker used on screen."""

        if self.required:
            return f"{self.label}*"
        return self.label


@dataclass(frozen=True)
class FreeTextStep(_BaseStep):
    kind: ClassVar[InputKind] = InputKind.FREE_TEXT


@dataclass(frozen=True)
class PhoneStep(_BaseStep):
    kind: ClassVar[InputKind] = InputKind.PHONE


@dataclass(frozen=True)
class EmailStep(_BaseStep):
    kind: ClassVar[InputKind] = InputKind.EMAIL


@dataclass(frozen=True)
class SingleSelectStep(_BaseStep):
    """Multiple-choice question; choosing an option confirms it automatically."""

    options: tuple[str, ...] = ()

    kind: ClassVar[InputKind] = InputKind.SINGLE_SELECT


Step: TypeAlias = FreeTextStep | PhoneStep | EmailStep | SingleSelectStep


__all__ = [
    "EmailStep",
    "FreeTextStep",
    "InputKind",
    "PhoneStep",
    "SingleSelectStep",
    "Step",
]
