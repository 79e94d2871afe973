"""Fake Prompter for testing.

FakePrompter answers prompts from a script instead of reading the terminal,
and records every prompt it was shown.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from change_source.core.prompter.abc import Prompter
from change_source.core.prompter.types import PromptChoice, PromptSeparator

T = TypeVar("T")


@dataclass(frozen=True)
class RecordedPrompt:
    """A prompt shown during a test.

    kind is "select", "checkbox" or "text"; choices holds the selectable
    values in display order (empty for text prompts); separators holds the
    labels of separator lines.
    """

    kind: str
    message: str
    choices: tuple[Any, ...]
    separators: tuple[str, ...]


class FakePrompter(Prompter):
    """Scripted implementation of interactive prompts.

    Constructor Injection:
    - answers are consumed in order, one per prompt
    - select() answers must be one of the offered values
    - checkbox() answers are lists of offered values
    - text() answers are strings

    Examples:
        >>> prompter = FakePrompter(answers=[ManualInputChoice(), "https://x/"])
        >>> url = choose_registry(ctx, "npm", "en")
        >>> prompter.prompts[0].kind
        'select'
    """

    def __init__(self, answers: Sequence[Any] | None = None) -> None:
        self._answers = list(answers) if answers is not None else []
        self._prompts: list[RecordedPrompt] = []

    def _next_answer(self, message: str) -> Any:
        if not self._answers:
            raise AssertionError(f"FakePrompter has no scripted answer for prompt: {message!r}")
        return self._answers.pop(0)

    def select(self, message: str, choices: Sequence[PromptChoice[T] | PromptSeparator]) -> T:
        values = tuple(c.value for c in choices if isinstance(c, PromptChoice))
        separators = tuple(c.label for c in choices if isinstance(c, PromptSeparator))
        self._prompts.append(RecordedPrompt("select", message, values, separators))
        answer = self._next_answer(message)
        if answer not in values:
            raise AssertionError(f"Scripted answer {answer!r} is not offered by prompt {message!r}")
        return answer

    def checkbox(
        self,
        message: str,
        choices: Sequence[PromptChoice[T]],
        *,
        required_message: str | None = None,
    ) -> list[T]:
        values = tuple(c.value for c in choices)
        self._prompts.append(RecordedPrompt("checkbox", message, values, ()))
        answer = list(self._next_answer(message))
        for item in answer:
            if item not in values:
                raise AssertionError(
                    f"Scripted answer {item!r} is not offered by prompt {message!r}"
                )
        if required_message is not None and not answer:
            raise AssertionError(f"Prompt {message!r} requires at least one selection")
        return answer

    def text(self, message: str, *, required_message: str | None = None) -> str:
        self._prompts.append(RecordedPrompt("text", message, (), ()))
        return str(self._next_answer(message)).strip()

    @property
    def prompts(self) -> list[RecordedPrompt]:
        """Prompts shown so far, in order.

        This property is for test assertions only.
        """
        return self._prompts.copy()

    @property
    def remaining_answers(self) -> list[Any]:
        """Scripted answers that were never consumed."""
        return self._answers.copy()
