class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    STEP_INPUT_PREFIX = "ui.step_input"
    COUNTRY_FILTER = "ui.country_filter"
    INTRO_START = "ui.intro.start"
    BACK_BUTTON = "ui.nav.back"
    CONFIRM_BUTTON = "ui.nav.confirm"
    COUNTRY_TOGGLE = "ui.country.toggle"
    COUNTRY_OPTION_PREFIX = "ui.country.option"
    STEP_OPTION_PREFIX = "ui.step_option"

    @classmethod
    def step_input(cls, step_id: str) -> str:
        return f"{cls.STEP_INPUT_PREFIX}.{step_id}"

    @classmethod
    def step_option(cls, step_id: str, index: int) -> str:
        return f"{cls.STEP_OPTION_PREFIX}.{step_id}.{index}"

    @classmethod
    def country_option(cls, iso_code: str) -> str:
        return f"{cls.COUNTRY_OPTION_PREFIX}.{iso_code}"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    WIZARD_ENGINE = "leadform.engine"
    SESSION_ID = "leadform.session_id"
    HANDOFF_PENDING = "leadform.handoff_pending"
