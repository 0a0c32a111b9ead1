"""Install location models."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, cast

InstallScope = Literal["personal", "project"]


def validate_install_scope(value: str) -> InstallScope:
    """Validate and return install scope.

    Raises:
        ValueError: If value is not a valid install scope
    """
    if value not in ("personal", "project"):
        raise ValueError(f"Invalid install scope: {value}")
    return cast(InstallScope, value)


@dataclass(frozen=True)
class InstallLocation:
    """Resolved skills directory for the current invocation.

    Attributes:
        scope: "personal" for ~/.claude/skills, "project" for <root>/.claude/skills
        base: Absolute path of the skills directory
    """

    scope: InstallScope
    base: Path

    def skill_dir(self, name: str) -> Path:
        """Directory a skill with the given name is installed into."""
        return self.base / name
