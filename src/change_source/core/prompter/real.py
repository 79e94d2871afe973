"""Production prompter rendering menus with questionary."""

from collections.abc import Sequence
from typing import Any, TypeVar

import click
import questionary

from change_source.core.prompter.abc import Prompter
from change_source.core.prompter.types import PromptChoice, PromptSeparator

T = TypeVar("T")


def _answered(answer: T | None) -> T:
    # questionary returns None when the prompt is interrupted
    if answer is None:
        raise click.Abort()
    return answer


class QuestionaryPrompter(Prompter):
    """Interactive prompts on the controlling terminal."""

    def select(self, message: str, choices: Sequence[PromptChoice[T] | PromptSeparator]) -> T:
        items: list[Any] = []
        for choice in choices:
            if isinstance(choice, PromptSeparator):
                items.append(questionary.Separator(choice.label))
            else:
                items.append(questionary.Choice(title=choice.display, value=choice.value))
        return _answered(questionary.select(message, choices=items).ask())

    def checkbox(
        self,
        message: str,
        choices: Sequence[PromptChoice[T]],
        *,
        required_message: str | None = None,
    ) -> list[T]:
        items = [questionary.Choice(title=choice.display, value=choice.value) for choice in choices]

        def validate(selected: list[T]) -> bool | str:
            if required_message is not None and not selected:
                return required_message
            return True

        return _answered(questionary.checkbox(message, choices=items, validate=validate).ask())

    def text(self, message: str, *, required_message: str | None = None) -> str:
        def validate(value: str) -> bool | str:
            if required_message is not None and not value.strip():
                return required_message
            return True

        answer = _answered(questionary.text(message, validate=validate).ask())
        return answer.strip()
