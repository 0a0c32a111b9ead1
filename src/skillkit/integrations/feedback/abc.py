"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Operations report progress and non-fatal problems through ctx.feedback
    instead of printing directly, so the CLI can choose how much to show and
    tests can count warnings.

    Two modes:
    - Interactive: Show all diagnostics (info, success, warnings, errors)
    - Quiet: Suppress info and success, keep warnings and errors

    Usage:
        ctx.feedback.info("Installing skill...")
        ctx.feedback.warning("docs/ not found, skipping")
        ctx.feedback.success("✓ Copied SKILL.md")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a non-fatal problem (always shown)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""
