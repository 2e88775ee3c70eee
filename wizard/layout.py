"""Streamlit rendering for the intake wizard.

The functions here only read the engine and forward widget events to it;
all navigation and formatting rules live in :mod:`wizard.engine`.
"""

from __future__ import annotations

import json
import time

import streamlit as st
import streamlit.components.v1 as components

import config as app_config
from constants.keys import StateKeys, UIKeys
from models.steps import PhoneStep, SingleSelectStep, Step
from wizard import content
from wizard.engine import WizardEngine


_WIZARD_STYLE = """
<style>
.leadform-step-indicator {
    font-family: monospace;
    font-size: 0.8rem;
    opacity: 0.6;
    margin-bottom: 0.5rem;
}

.leadform-sub-label {
    font-style: italic;
    opacity: 0.8;
}

.leadform-signature p {
    margin: 0;
    font-size: 1.2rem;
}
</style>
"""


def inject_wizard_style() -> None:
    st.markdown(_WIZARD_STYLE, unsafe_allow_html=True)


def _on_text_change(engine: WizardEngine, key: str) -> None:
    engine.input(str(st.session_state.get(key, "")))
    # Write the masked value back so the widget shows the formatted draft.
    st.session_state[key] = engine.state.draft


def _on_filter_change(engine: WizardEngine) -> None:
    engine.set_country_filter(str(st.session_state.get(UIKeys.COUNTRY_FILTER, "")))


def render_intro(engine: WizardEngine) -> None:
    st.title(content.INTRO_TITLE)
    for paragraph in content.INTRO_PARAGRAPHS:
        st.write(paragraph)
    st.markdown(f"**{content.INTRO_CALL_TO_ACTION}**")
    st.button(
        content.INTRO_BUTTON_LABEL,
        key=UIKeys.INTRO_START,
        type="primary",
        on_click=engine.advance,
    )


def render_country_picker(engine: WizardEngine) -> None:
    """Render the flag toggle, dial code and (when open) the filterable list."""

    state = engine.state
    flag_col, dial_col = st.columns([1, 4])
    with flag_col:
        st.button(
            f"{state.active_country.flag} ▼",
            key=UIKeys.COUNTRY_TOGGLE,
            on_click=engine.toggle_country_picker,
        )
    with dial_col:
        st.markdown(f"**{state.active_country.dial_code}**")

    if not state.country_picker_open:
        return

    if st.session_state.get(UIKeys.COUNTRY_FILTER) != state.country_filter_text:
        st.session_state[UIKeys.COUNTRY_FILTER] = state.country_filter_text
    st.text_input(
        content.COUNTRY_SEARCH_PLACEHOLDER,
        key=UIKeys.COUNTRY_FILTER,
        placeholder=content.COUNTRY_SEARCH_PLACEHOLDER,
        label_visibility="collapsed",
        on_change=_on_filter_change,
        args=(engine,),
    )
    countries = engine.visible_countries
    if not countries:
        st.caption(content.COUNTRY_EMPTY_RESULT)
        return
    for country in countries:
        st.button(
            f"{country.flag}  {country.display_name}  {country.dial_code}",
            key=UIKeys.country_option(country.iso_code),
            on_click=engine.select_country,
            args=(country,),
        )


def render_text_input(engine: WizardEngine, step: Step) -> None:
    key = UIKeys.step_input(step.id)
    if st.session_state.get(key) != engine.state.draft:
        st.session_state[key] = engine.state.draft
    is_phone = isinstance(step, PhoneStep)
    if is_phone:
        render_country_picker(engine)
    st.text_input(
        step.display_label,
        key=key,
        placeholder=content.PHONE_PLACEHOLDER if is_phone else (step.placeholder or ""),
        label_visibility="collapsed",
        on_change=_on_text_change,
        args=(engine, key),
    )


def render_options(engine: WizardEngine, step: SingleSelectStep) -> None:
    for index, option in enumerate(step.options):
        st.button(
            f"{content.option_letter(index)}   {option}",
            key=UIKeys.step_option(step.id, index),
            type="primary" if engine.is_selected(option) else "secondary",
            on_click=engine.choose_option,
            args=(option,),
        )


def render_navigation(engine: WizardEngine) -> None:
    back_col, confirm_col = st.columns([1, 5])
    with back_col:
        st.button(
            content.BACK_BUTTON_LABEL,
            key=UIKeys.BACK_BUTTON,
            help=content.BACK_BUTTON_HELP,
            on_click=engine.back,
        )
    with confirm_col:
        st.button(
            content.CONFIRM_BUTTON_LABEL,
            key=UIKeys.CONFIRM_BUTTON,
            type="primary",
            help=content.CONFIRM_HINT,
            on_click=engine.confirm,
        )


def render_question(engine: WizardEngine, step: Step) -> None:
    st.progress(int(engine.progress))
    st.markdown(
        f"<div class='leadform-step-indicator'>{engine.step_indicator}</div>",
        unsafe_allow_html=True,
    )
    st.subheader(step.display_label)
    if step.sub_label:
        st.markdown(
            f"<p class='leadform-sub-label'>{step.sub_label}</p>",
            unsafe_allow_html=True,
        )
    if isinstance(step, SingleSelectStep):
        render_options(engine, step)
    else:
        render_text_input(engine, step)
    render_navigation(engine)


def open_handoff(url: str) -> None:
    """Open ``url`` in a new browser tab from the Streamlit iframe."""

    components.html(
        f"<script>window.parent.open({json.dumps(url)}, '_blank');</script>",
        height=0,
        width=0,
    )


def render_success(engine: WizardEngine) -> None:
    pending_url = st.session_state.pop(StateKeys.HANDOFF_PENDING, None)
    if isinstance(pending_url, str) and pending_url and app_config.OPEN_HANDOFF_IN_NEW_TAB:
        open_handoff(pending_url)
    st.header(content.SUCCESS_TITLE)
    signature = "".join(f"<p>{line}</p>" for line in content.SUCCESS_SIGNATURE)
    st.markdown(f"<div class='leadform-signature'>{signature}</div>", unsafe_allow_html=True)
    if engine.state.handoff_url:
        st.link_button(content.HANDOFF_LINK_LABEL, engine.state.handoff_url)


def settle_auto_confirm(engine: WizardEngine) -> None:
    """Keep the chosen option highlighted for the delay, then advance."""

    if engine.state.pending_confirm is None:
        return
    remaining = engine.auto_confirm_remaining
    if remaining > 0:
        time.sleep(remaining)
    engine.poll()
    st.rerun()


def render_wizard(engine: WizardEngine) -> None:
    """Render the screen matching the engine's current position."""

    inject_wizard_style()
    if engine.is_intro:
        render_intro(engine)
        return
    if engine.is_complete:
        render_success(engine)
        return
    step = engine.current_step
    if step is None:
        return
    render_question(engine, step)
    settle_auto_confirm(engine)


__all__ = [
    "open_handoff",
    "render_country_picker",
    "render_intro",
    "render_navigation",
    "render_options",
    "render_question",
    "render_success",
    "render_text_input",
    "render_wizard",
    "settle_auto_confirm",
]
