"""Menu items handed to a Prompter."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PromptChoice(Generic[T]):
    """A selectable menu entry: what the user sees and what the prompt returns."""

    display: str
    value: T


@dataclass(frozen=True)
class PromptSeparator:
    """A non-selectable divider line inside a single-select menu."""

    label: str
