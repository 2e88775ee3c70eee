"""State machine behind the one-question-at-a-time intake wizard.

Positions run from ``0`` (intro screen) through ``1..N`` (one per step) to
``N + 1`` (completion screen). Every user action is a method on
:class:`WizardEngine`; actions that do not apply to the current position are
ignored and leave the state untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

import config as app_config
from infra.logging import log_event
from models.country import Country
from models.steps import PhoneStep, SingleSelectStep, Step
from utils.logging_context import log_context
from wizard.countries import COUNTRIES, DEFAULT_COUNTRY, get_country
from wizard.country_picker import filter_countries
from wizard.phone import compose_phone_value, format_phone_input, strip_dial_code
from wizard.scheduler import AutoConfirmScheduler, PendingConfirm
from wizard.serializer import serialize_answers
from wizard.step_registry import WIZARD_STEPS, step_for_position, validate_step_table

logger = logging.getLogger(__name__)

HandoffOpener = Callable[[str], None]

INTRO_POSITION = 0


@dataclass
class WizardState:
    """Mutable session state owned by a single :class:`WizardEngine`."""

    position: int = INTRO_POSITION
    answers: dict[str, str] = field(default_factory=dict)
    draft: str = ""
    active_country: Country = DEFAULT_COUNTRY
    country_picker_open: bool = False
    country_filter_text: str = ""
    pending_confirm: PendingConfirm | None = None
    handoff_url: str | None = None


class WizardEngine:
    """Drive navigation, input normalisation and the final hand-off."""

    def __init__(
        self,
        steps: Sequence[Step] = WIZARD_STEPS,
        *,
        countries: Sequence[Country] = COUNTRIES,
        title: str | None = None,
        destination: str | None = None,
        base_url: str | None = None,
        auto_confirm_delay: float | None = None,
        opener: HandoffOpener | None = None,
        clock: Callable[[], float] | None = None,
        state: WizardState | None = None,
    ) -> None:
        self._steps: tuple[Step, ...] = validate_step_table(steps)
        self._countries: tuple[Country, ...] = tuple(countries) or COUNTRIES
        self._title = title if title is not None else app_config.MESSAGE_TITLE
        self._destination = destination if destination is not None else app_config.get_destination_number()
        self._base_url = base_url if base_url is not None else app_config.HANDOFF_BASE_URL
        delay = auto_confirm_delay if auto_confirm_delay is not None else app_config.AUTO_CONFIRM_DELAY_SECONDS
        self._scheduler = AutoConfirmScheduler(delay=delay, clock=clock)
        self._opener = opener
        self._state = state if state is not None else self._fresh_state()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def state(self) -> WizardState:
        return self._state

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def countries(self) -> tuple[Country, ...]:
        return self._countries

    @property
    def step_count(self) -> int:
        return len(self._steps)

    @property
    def complete_position(self) -> int:
        return self.step_count + 1

    @property
    def answers(self) -> Mapping[str, str]:
        return MappingProxyType(self._state.answers)

    @property
    def current_step(self) -> Step | None:
        """Return the step on screen, or ``None`` on the intro/completion screens."""

        return step_for_position(self._state.position, self._steps)

    @property
    def is_intro(self) -> bool:
        return self._state.position == INTRO_POSITION

    @property
    def is_complete(self) -> bool:
        return self._state.position == self.complete_position

    @property
    def progress(self) -> float:
        """Return completion in percent for the top progress bar."""

        if self.is_intro:
            return 0.0
        if self.is_complete:
            return 100.0
        return self._state.position / self.step_count * 100

    @property
    def step_indicator(self) -> str:
        if self.current_step is None:
            return ""
        return f"{self._state.position} / {self.step_count}"

    @property
    def visible_countries(self) -> tuple[Country, ...]:
        return filter_countries(self._state.country_filter_text, self._countries)

    @property
    def auto_confirm_remaining(self) -> float:
        """Seconds until the pending auto-confirm fires (``0.0`` when idle)."""

        return self._scheduler.remaining(self._state.pending_confirm)

    def is_selected(self, option: str) -> bool:
        return self._state.draft == option

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def advance(self) -> None:
        """Leave the intro screen for the first step."""

        if not self.is_intro:
            return
        self._enter(1)
        logger.debug("Wizard started")

    def confirm(self) -> None:
        """Commit the draft for the current step and move forward.

        On the intro screen this acts as :meth:`advance`. Blank drafts are
        ignored. Confirming the last step builds the hand-off URL, passes it to
        the opener and shows the completion screen.
        """

        if self.is_intro:
            self.advance()
            return
        step = self.current_step
        if step is None:
            return
        self._commit(step, self._state.draft)

    def back(self) -> None:
        """Return to the previous position, keeping committed answers."""

        if self.is_intro or self.is_complete:
            return
        self._cancel_pending()
        self._enter(self._state.position - 1)

    def restart(self) -> None:
        """Discard everything and return to the intro screen."""

        self._cancel_pending()
        self._state = self._fresh_state()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def input(self, raw: str) -> None:
        """Store a keystroke update as the draft, masking phone numbers."""

        step = self.current_step
        if step is None or isinstance(step, SingleSelectStep):
            return
        if isinstance(step, PhoneStep):
            self._state.draft = format_phone_input(raw, self._state.active_country)
        else:
            self._state.draft = raw

    def choose_option(self, option: str) -> None:
        """Select ``option`` and schedule the automatic confirm.

        A newer selection replaces the pending confirm of an older one.
        """

        step = self.current_step
        if not isinstance(step, SingleSelectStep) or option not in step.options:
            return
        self._state.draft = option
        self._state.pending_confirm = self._scheduler.schedule(
            self._state.pending_confirm,
            step_id=step.id,
            value=option,
        )

    def poll(self) -> None:
        """Fire the pending auto-confirm once its delay has elapsed."""

        pending = self._scheduler.take_due(self._state.pending_confirm)
        if pending is None:
            return
        self._state.pending_confirm = None
        step = self.current_step
        if step is None or step.id != pending.step_id:
            return
        self._commit(step, pending.value)

    # ------------------------------------------------------------------
    # Country picker
    # ------------------------------------------------------------------
    def toggle_country_picker(self) -> None:
        self._state.country_picker_open = not self._state.country_picker_open

    def close_country_picker(self) -> None:
        self._state.country_picker_open = False

    def set_country_filter(self, text: str) -> None:
        self._state.country_filter_text = text

    def select_country(self, country: Country) -> None:
        """Switch the active country and clear the in-progress phone digits."""

        if country not in self._countries:
            return
        self._state.active_country = country
        self._state.country_picker_open = False
        self._state.country_filter_text = ""
        if isinstance(self.current_step, PhoneStep):
            self._state.draft = ""
        logger.debug("Active country set to %s", country.iso_code)

    def select_country_code(self, iso_code: str) -> None:
        """Select a country by ISO code.

        Raises:
            UnknownCountryError: If ``iso_code`` is not in the directory.
        """

        self.select_country(get_country(iso_code))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _fresh_state(self) -> WizardState:
        return WizardState(active_country=self._countries[0])

    def _cancel_pending(self) -> None:
        pending = self._state.pending_confirm
        if pending is not None:
            pending.cancel()
            self._state.pending_confirm = None

    def _enter(self, position: int) -> None:
        self._state.position = position
        step = self.current_step
        if step is None:
            self._state.draft = ""
            return
        stored = self._state.answers.get(step.id)
        if stored is None:
            self._state.draft = ""
        elif isinstance(step, PhoneStep):
            self._state.draft = strip_dial_code(stored, self._state.active_country)
        else:
            self._state.draft = stored

    def _commit(self, step: Step, value: str) -> None:
        if not value.strip():
            return
        self._cancel_pending()
        if isinstance(step, PhoneStep):
            committed = compose_phone_value(value, self._state.active_country)
        else:
            committed = value
        self._state.answers[step.id] = committed
        with log_context(wizard_step=step.id):
            logger.info("Committed answer for step '%s' (%d/%d)", step.id, self._state.position, self.step_count)
            if self._state.position < self.step_count:
                self._enter(self._state.position + 1)
            else:
                self._hand_off()

    def _hand_off(self) -> None:
        url = serialize_answers(
            self._state.answers,
            self._steps,
            title=self._title,
            destination=self._destination,
            base_url=self._base_url,
        )
        self._state.handoff_url = url
        log_event(
            "info",
            event="handoff",
            position=self.complete_position,
            answer_count=len(self._state.answers),
            payload={"handoff_url": url},
        )
        if self._opener is not None:
            self._opener(url)
        self._enter(self.complete_position)


__all__ = ["HandoffOpener", "INTRO_POSITION", "WizardEngine", "WizardState"]
