"""Fake UserFeedback implementation for testing."""

from skillkit.integrations.feedback.abc import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures messages by level instead of printing them."""

    def __init__(self) -> None:
        self._messages: list[tuple[str, str]] = []

    @property
    def messages(self) -> list[tuple[str, str]]:
        """All (level, message) pairs in emission order."""
        return self._messages.copy()

    @property
    def infos(self) -> list[str]:
        return [m for level, m in self._messages if level == "info"]

    @property
    def successes(self) -> list[str]:
        return [m for level, m in self._messages if level == "success"]

    @property
    def warnings(self) -> list[str]:
        return [m for level, m in self._messages if level == "warning"]

    @property
    def errors(self) -> list[str]:
        return [m for level, m in self._messages if level == "error"]

    def info(self, message: str) -> None:
        self._messages.append(("info", message))

    def success(self, message: str) -> None:
        self._messages.append(("success", message))

    def warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def error(self, message: str) -> None:
        self._messages.append(("error", message))
