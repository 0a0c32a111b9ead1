"""Terminal implementations of UserFeedback."""

import click

from skillkit.integrations.feedback.abc import UserFeedback
from skillkit.output import user_output


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        """Show warning with a yellow prefix."""
        user_output(click.style("⚠ Warning: ", fg="yellow") + message)

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet: only warnings and errors are shown."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        user_output(click.style("⚠ Warning: ", fg="yellow") + message)

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
