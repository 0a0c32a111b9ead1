"""Fake HookRunner implementation for testing."""

from pathlib import Path

from skillkit.errors import HookExecutionError
from skillkit.integrations.hook_runner.abc import HookRunner


class FakeHookRunner(HookRunner):
    """Records hook invocations without spawning processes.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, exit_code: int = 0, spawn_error: OSError | None = None) -> None:
        """Create FakeHookRunner.

        Args:
            exit_code: Exit code returned from run()
            spawn_error: If set, run() raises HookExecutionError wrapping this error
        """
        self._exit_code = exit_code
        self._spawn_error = spawn_error
        self._run_calls: list[tuple[str, Path]] = []

    @property
    def run_calls(self) -> list[tuple[str, Path]]:
        """Get the list of (command, cwd) tuples passed to run().

        This property is for test assertions only.
        """
        return self._run_calls.copy()

    def run(self, command: str, cwd: Path) -> int:
        self._run_calls.append((command, cwd))
        if self._spawn_error is not None:
            raise HookExecutionError(command, self._spawn_error)
        return self._exit_code
