"""Real filesystem implementation using pathlib and shutil."""

import shutil
from pathlib import Path

from skillkit.integrations.filesystem.abc import Filesystem


class RealFilesystem(Filesystem):
    """Production implementation operating on the local disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def mkdir(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def list_dir(self, path: Path) -> list[Path]:
        return sorted(path.iterdir(), key=lambda p: p.name)

    def copy_file(self, source: Path, dest: Path) -> None:
        shutil.copyfile(source, dest)

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Write atomically via a temporary sibling file and rename."""
        temp_path = path.with_name(path.name + ".tmp")
        temp_path.write_text(content, encoding="utf-8")
        temp_path.replace(path)

    def remove_file(self, path: Path) -> None:
        path.unlink()

    def remove_dir(self, path: Path) -> None:
        path.rmdir()
