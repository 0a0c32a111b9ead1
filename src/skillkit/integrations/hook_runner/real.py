"""Real hook runner using subprocess."""

import subprocess
from pathlib import Path

from skillkit.errors import HookExecutionError
from skillkit.integrations.hook_runner.abc import HookRunner


class RealHookRunner(HookRunner):
    """Production implementation that runs hooks through the system shell.

    The command string is trusted exactly as far as the descriptor that
    declares it. No sandboxing is applied.
    """

    def run(self, command: str, cwd: Path) -> int:
        try:
            result = subprocess.run(command, shell=True, cwd=cwd, check=False)
        except OSError as e:
            raise HookExecutionError(command, e) from e
        return result.returncode
