"""Filesystem operations abstraction for testing.

Only primitive, single-entry operations live here. Recursive copy and
delete are built on top of them in skillkit.operations.materialize so that
fakes can simulate failures at any point of a tree walk.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract filesystem operations for dependency injection."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if path exists and is a directory, following symbolic links."""
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Check if path exists and is a regular file."""
        ...

    @abstractmethod
    def is_symlink(self, path: Path) -> bool:
        """Check if path is a symbolic link, whether or not its target exists."""
        ...

    @abstractmethod
    def mkdir(self, path: Path) -> None:
        """Create directory and any missing parents.

        Does nothing if the directory already exists.

        Raises:
            OSError: If the directory cannot be created
        """
        ...

    @abstractmethod
    def list_dir(self, path: Path) -> list[Path]:
        """List direct children of a directory, sorted by name.

        Raises:
            FileNotFoundError: If path does not exist
            NotADirectoryError: If path is not a directory
        """
        ...

    @abstractmethod
    def copy_file(self, source: Path, dest: Path) -> None:
        """Copy file contents from source to dest, overwriting dest.

        The parent directory of dest must already exist.

        Raises:
            FileNotFoundError: If source does not exist
            OSError: If dest cannot be written
        """
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If path does not exist
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, replacing any existing content.

        The parent directory must already exist.

        Raises:
            OSError: If path cannot be written
        """
        ...

    @abstractmethod
    def remove_file(self, path: Path) -> None:
        """Remove a single file or symbolic link. A link's target is left alone.

        Raises:
            OSError: If the file cannot be removed
        """
        ...

    @abstractmethod
    def remove_dir(self, path: Path) -> None:
        """Remove an empty directory.

        Raises:
            OSError: If the directory is not empty or cannot be removed
        """
        ...
