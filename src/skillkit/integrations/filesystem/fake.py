"""Fake Filesystem implementation for testing.

FakeFilesystem keeps files and directories in memory so tests can exercise
copy and delete tree walks, including failures, without touching disk.
"""

from pathlib import Path

from skillkit.integrations.filesystem.abc import Filesystem


def _is_under(path: Path, roots: frozenset[Path]) -> bool:
    return any(path == root or root in path.parents for root in roots)


class FakeFilesystem(Filesystem):
    """In-memory fake filesystem.

    All state is provided via constructor or captured during execution.
    Parent directories of every seeded file are created implicitly.

    Examples:
        >>> fs = FakeFilesystem(files={Path("/bundle/SKILL.md"): "# Skill"})
        >>> fs.is_dir(Path("/bundle"))
        True

        # Simulate an unwritable skills directory
        >>> fs = FakeFilesystem(fail_writes_under=[Path("/home/u/.claude")])
    """

    def __init__(
        self,
        *,
        files: dict[Path, str] | None = None,
        directories: list[Path] | None = None,
        fail_writes_under: list[Path] | None = None,
        fail_removals_under: list[Path] | None = None,
        symlinks: dict[Path, Path] | None = None,
    ) -> None:
        """Create fake filesystem with initial contents.

        Args:
            files: Mapping of absolute file path to text content
            directories: Additional (possibly empty) directories
            fail_writes_under: Paths under which mkdir/copy/write raise PermissionError
            fail_removals_under: Paths under which removals raise PermissionError
            symlinks: Mapping of link path to the absolute path it points at
        """
        self._files: dict[Path, str] = {}
        self._dirs: set[Path] = set()
        self._fail_writes_under = frozenset(fail_writes_under or [])
        self._fail_removals_under = frozenset(fail_removals_under or [])
        self._copy_calls: list[tuple[Path, Path]] = []
        self._removed: list[Path] = []
        self._links: dict[Path, Path] = {}

        for directory in directories or []:
            self._add_dir(directory)
        for path, content in (files or {}).items():
            self._add_dir(path.parent)
            self._files[path] = content
        for link, target in (symlinks or {}).items():
            self._add_dir(link.parent)
            self._links[link] = target

    def _add_dir(self, path: Path) -> None:
        self._dirs.add(path)
        for parent in path.parents:
            self._dirs.add(parent)

    def _check_writable(self, path: Path) -> None:
        if _is_under(path, self._fail_writes_under):
            raise PermissionError(f"Permission denied: '{path}'")

    def _check_removable(self, path: Path) -> None:
        if _is_under(path, self._fail_removals_under):
            raise PermissionError(f"Permission denied: '{path}'")

    @property
    def files(self) -> dict[Path, str]:
        """Snapshot of file contents for test assertions."""
        return dict(self._files)

    @property
    def directories(self) -> set[Path]:
        """Snapshot of existing directories for test assertions."""
        return set(self._dirs)

    @property
    def copy_calls(self) -> list[tuple[Path, Path]]:
        """(source, dest) pairs passed to copy_file(), for test assertions."""
        return self._copy_calls.copy()

    @property
    def removed_paths(self) -> list[Path]:
        """Files, links and directories removed, in order, for test assertions."""
        return self._removed.copy()

    def _follow(self, path: Path) -> Path:
        return self._links.get(path, path)

    def exists(self, path: Path) -> bool:
        target = self._follow(path)
        return target in self._files or target in self._dirs

    def is_dir(self, path: Path) -> bool:
        return self._follow(path) in self._dirs

    def is_file(self, path: Path) -> bool:
        return self._follow(path) in self._files

    def is_symlink(self, path: Path) -> bool:
        return path in self._links

    def mkdir(self, path: Path) -> None:
        if path in self._files:
            raise FileExistsError(f"File exists: '{path}'")
        if path in self._dirs:
            return
        self._check_writable(path)
        self._add_dir(path)

    def list_dir(self, path: Path) -> list[Path]:
        if path in self._links:
            return [path / child.name for child in self.list_dir(self._links[path])]
        if path in self._files:
            raise NotADirectoryError(f"Not a directory: '{path}'")
        if path not in self._dirs:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        children = {p for p in self._files if p.parent == path}
        children.update(d for d in self._dirs if d.parent == path and d != path)
        children.update(link for link in self._links if link.parent == path)
        return sorted(children, key=lambda p: p.name)

    def copy_file(self, source: Path, dest: Path) -> None:
        source = self._follow(source)
        if source not in self._files:
            raise FileNotFoundError(f"No such file or directory: '{source}'")
        if dest.parent not in self._dirs:
            raise FileNotFoundError(f"No such file or directory: '{dest.parent}'")
        self._check_writable(dest)
        self._files[dest] = self._files[source]
        self._copy_calls.append((source, dest))

    def read_text(self, path: Path) -> str:
        path = self._follow(path)
        if path not in self._files:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        return self._files[path]

    def write_text(self, path: Path, content: str) -> None:
        if path.parent not in self._dirs:
            raise FileNotFoundError(f"No such file or directory: '{path.parent}'")
        self._check_writable(path)
        self._files[path] = content

    def remove_file(self, path: Path) -> None:
        if path in self._links:
            self._check_removable(path)
            del self._links[path]
            self._removed.append(path)
            return
        if path not in self._files:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        self._check_removable(path)
        del self._files[path]
        self._removed.append(path)

    def remove_dir(self, path: Path) -> None:
        if path not in self._dirs:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        if (
            any(p.parent == path for p in self._files)
            or any(d.parent == path and d != path for d in self._dirs)
            or any(link.parent == path for link in self._links)
        ):
            raise OSError(f"Directory not empty: '{path}'")
        self._check_removable(path)
        self._dirs.discard(path)
        self._removed.append(path)
