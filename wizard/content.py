"""Static copy for the intro, question and completion screens."""

from __future__ import annotations

from typing import Final

INTRO_TITLE: Final[str] = "Pedro L - Growth Partner"
INTRO_PARAGRAPHS: Final[tuple[str, ...]] = (
    "Construímos a máquina de vendas para criadores, experts e influenciadores.",
    "Não somos uma agência de marketing nem prestadores de serviços. Mas sim sócios de crescimento do seu negócio.",
    "Te ajudamos a elevar sua autoridade com produtos que atraem e vendem no automático.",
    "Sem mensalidades, R$0 custo inicial. Você ganha, nós ganhamos!",
)
INTRO_CALL_TO_ACTION: Final[str] = "Faça a sua aplicação e veja como podemos ajudar você."
INTRO_BUTTON_LABEL: Final[str] = "Vamos"

SUCCESS_TITLE: Final[str] = "Muito obrigado, entraremos em contato em breve!"
SUCCESS_SIGNATURE: Final[tuple[str, ...]] = ("Um abraço,", "Pedro Laterza.")
HANDOFF_LINK_LABEL: Final[str] = "Abrir WhatsApp"

CONFIRM_BUTTON_LABEL: Final[str] = "OK"
CONFIRM_HINT: Final[str] = "press Enter ↵"
BACK_BUTTON_LABEL: Final[str] = "<"
BACK_BUTTON_HELP: Final[str] = "Voltar"

PHONE_PLACEHOLDER: Final[str] = "(99) 99999-9999"
COUNTRY_SEARCH_PLACEHOLDER: Final[str] = "Pesquisar países..."
COUNTRY_EMPTY_RESULT: Final[str] = "Nenhum país encontrado"


def option_letter(index: int) -> str:
    """Return the badge letter for the option at ``index`` (``0`` → ``"A"``)."""

    return chr(ord("A") + index)
