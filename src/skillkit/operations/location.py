"""Install location resolution.

Install and uninstall both call resolve_install_location() so they agree on
the target directory for the same environment and working directory.
"""

from pathlib import Path

from skillkit.integrations.filesystem.abc import Filesystem
from skillkit.models import InstallLocation

PROJECT_ROOT_MARKERS = ("package.json", "pyproject.toml", ".git")


def find_project_root(fs: Filesystem, start: Path) -> Path:
    """Walk up from `start` to the nearest directory holding a project marker.

    Checks `start` and each of its parents, including the filesystem root,
    for a package manifest or a `.git` entry (directory, or file for git
    worktrees).

    Returns:
        The first matching directory, or `start` when nothing matches
    """
    for candidate in [start, *start.parents]:
        if any(fs.exists(candidate / marker) for marker in PROJECT_ROOT_MARKERS):
            return candidate
    return start


def resolve_install_location(
    fs: Filesystem, *, global_install: bool, cwd: Path, home: Path
) -> InstallLocation:
    """Determine where skills are installed for this invocation.

    Args:
        fs: Filesystem used for project marker checks
        global_install: True to install for the current user
        cwd: Directory to start the project root search from
        home: User home directory

    Returns:
        Personal location under ~/.claude/skills, or project location under
        <project-root>/.claude/skills
    """
    if global_install:
        return InstallLocation(scope="personal", base=home / ".claude" / "skills")

    project_root = find_project_root(fs, cwd)
    return InstallLocation(scope="project", base=project_root / ".claude" / "skills")
