"""Interactive prompts.

``Prompter`` is the interface the selection collector talks to;
``ClickPrompter`` implements it on top of ``click.prompt``. Any
``click.Abort`` (Ctrl-C, EOF) becomes ``UserCancelledError``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import click

from specment.errors import UserCancelledError
from specment.locales import Language, DEFAULT_LANGUAGE, translate
from specment.ui import formatter


@dataclass(frozen=True)
class Choice:
    value: str
    label: str
    hint: str = ""


def parse_multi_choice(raw: str, choices: Sequence[Choice]) -> List[str]:
    """Parse ``"1, 3"`` or ``"requirements,api-spec"`` into choice values.

    Order follows the input; duplicates are dropped.

    Raises:
        ValueError: with the offending token
    """
    values = []
    for token in (t.strip() for t in raw.split(",")):
        if not token:
            continue
        if token.isdigit() and 1 <= int(token) <= len(choices):
            value = choices[int(token) - 1].value
        elif any(c.value == token for c in choices):
            value = token
        else:
            raise ValueError(token)
        if value not in values:
            values.append(value)
    return values


class Prompter(ABC):
    """Prompt interface used by the selection collector."""

    @abstractmethod
    def select(self, message: str, choices: Sequence[Choice], language: Language = DEFAULT_LANGUAGE) -> str:
        pass

    @abstractmethod
    def text(
        self,
        message: str,
        default: Optional[str] = None,
        validate: Optional[Callable[[str], Optional[str]]] = None,
        language: Language = DEFAULT_LANGUAGE,
    ) -> str:
        pass

    @abstractmethod
    def multiselect(
        self,
        message: str,
        choices: Sequence[Choice],
        required: bool = True,
        language: Language = DEFAULT_LANGUAGE,
    ) -> List[str]:
        pass

    def note(self, title: str, lines: Sequence[str]) -> None:
        formatter.note(title, lines)


class ClickPrompter(Prompter):
    """Prompts on the terminal via click."""

    def _prompt(self, message: str, **kwargs) -> str:
        try:
            return click.prompt(message, **kwargs)
        except click.Abort:
            raise UserCancelledError()

    def select(self, message, choices, language=DEFAULT_LANGUAGE):
        formatter.choice_table([(c.value, c.label, c.hint) for c in choices])
        while True:
            raw = self._prompt(message, default="1").strip()
            try:
                values = parse_multi_choice(raw, choices)
            except ValueError as e:
                formatter.error(translate(language, "invalid_choice", value=e))
                continue
            if len(values) == 1:
                return values[0]
            formatter.error(translate(language, "invalid_choice", value=raw))

    def text(self, message, default=None, validate=None, language=DEFAULT_LANGUAGE):
        while True:
            if default:
                value = self._prompt(message, default=default)
            else:
                value = self._prompt(message, default="", show_default=False)
            error = validate(value) if validate else None
            if error is None:
                return value
            formatter.error(error)

    def multiselect(self, message, choices, required=True, language=DEFAULT_LANGUAGE):
        formatter.choice_table([(c.value, c.label, c.hint) for c in choices])
        while True:
            raw = self._prompt(message, default="", show_default=False)
            try:
                values = parse_multi_choice(raw, choices)
            except ValueError as e:
                formatter.error(translate(language, "invalid_choice", value=e))
                continue
            if required and not values:
                formatter.error(translate(language, "choice_required"))
                continue
            return values
