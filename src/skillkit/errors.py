"""Exceptions raised by skill install and uninstall operations.

Fatal install errors all derive from SkillKitError so the CLI error boundary
can report them with a single troubleshooting checklist.
"""

from pathlib import Path


class SkillKitError(Exception):
    """Base class for predictable skill lifecycle failures."""


class DescriptorMissingError(SkillKitError):
    """Raised when the bundle has no .claude-skill.json."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path.name} not found in {path.parent}")
        self.path = path


class DescriptorInvalidError(SkillKitError):
    """Raised when .claude-skill.json is not valid JSON or has the wrong shape."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid skill descriptor {path}: {reason}")
        self.path = path
        self.reason = reason


class RequiredFileMissingError(SkillKitError):
    """Raised when the bundle is missing SKILL.md."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{path.name} is required but not found at {path}")
        self.path = path


class ManifestWriteError(SkillKitError):
    """Raised when .skills-manifest.json cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not write manifest {path}: {cause}")
        self.path = path
        self.cause = cause


class HookExecutionError(SkillKitError):
    """Raised when a postinstall hook cannot be spawned."""

    def __init__(self, command: str, cause: OSError) -> None:
        super().__init__(f"Could not run '{command}': {cause}")
        self.command = command
        self.cause = cause
