"""Abstract interface for interactive terminal prompts."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

from change_source.core.prompter.types import PromptChoice, PromptSeparator

T = TypeVar("T")


class Prompter(ABC):
    """Asks the user questions and blocks until they answer.

    Implementations raise click.Abort when the user cancels a prompt.
    """

    @abstractmethod
    def select(self, message: str, choices: Sequence[PromptChoice[T] | PromptSeparator]) -> T:
        """Single-select menu; returns the value of the chosen entry."""
        ...

    @abstractmethod
    def checkbox(
        self,
        message: str,
        choices: Sequence[PromptChoice[T]],
        *,
        required_message: str | None = None,
    ) -> list[T]:
        """Multi-select menu; returns the values of every checked entry.

        Args:
            message: Question shown above the menu
            choices: Entries the user can check
            required_message: When given, an empty selection is rejected with
                this message instead of being returned
        """
        ...

    @abstractmethod
    def text(self, message: str, *, required_message: str | None = None) -> str:
        """Free-text input; returns the entered text with surrounding whitespace removed.

        Args:
            message: Question shown to the user
            required_message: When given, blank input is rejected with this message
        """
        ...
