"""Hook execution interface for skill lifecycle hooks."""

from abc import ABC, abstractmethod
from pathlib import Path


class HookRunner(ABC):
    """Abstract interface for running skill hook commands.

    Real implementations spawn a shell. Fake implementations record calls
    for unit tests without creating processes.
    """

    @abstractmethod
    def run(self, command: str, cwd: Path) -> int:
        """Run a shell command and wait for it to finish.

        Standard streams are inherited from the calling process.

        Args:
            command: Shell command string from the skill descriptor
            cwd: Working directory for the command

        Returns:
            Exit code of the command

        Raises:
            HookExecutionError: If the command could not be started
        """
        ...
