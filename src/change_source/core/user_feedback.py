"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from change_source.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing messages for the interactive flows.

    Flows call ctx.feedback methods instead of echoing directly so tests can
    capture exactly what the user was told.

    Usage:
        ctx.feedback.info("Nothing to delete")
        ctx.feedback.success("Deleted custom registries")
        ctx.feedback.error("[npm] An error occurred: ...")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to stderr with terminal styling."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        """Show warning message in yellow."""
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))
