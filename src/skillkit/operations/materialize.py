"""Copying skill files into place and removing them again.

None of these operations are transactional. A failure part way through
leaves a partially populated directory that the next install overwrites.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from skillkit.errors import RequiredFileMissingError
from skillkit.integrations.feedback.abc import UserFeedback
from skillkit.integrations.filesystem.abc import Filesystem

logger = logging.getLogger(__name__)

REQUIRED_FILENAME = "SKILL.md"


def _join_inside(base: Path, declared: str) -> Path:
    """Join a declared path onto base, dropping any root or drive.

    "/tmp/x.txt" under base becomes base/tmp/x.txt.
    """
    path = Path(declared)
    if path.anchor:
        path = path.relative_to(path.anchor)
    return base / path


def copy_required(fs: Filesystem, source_dir: Path, target_dir: Path) -> Path:
    """Copy SKILL.md from the bundle into the target directory.

    Creates target_dir (and parents) when missing.

    Returns:
        Path of the copied file

    Raises:
        RequiredFileMissingError: If the bundle has no SKILL.md
    """
    source = source_dir / REQUIRED_FILENAME
    if not fs.is_file(source):
        raise RequiredFileMissingError(source)

    fs.mkdir(target_dir)
    dest = target_dir / REQUIRED_FILENAME
    fs.copy_file(source, dest)
    return dest


def copy_tree(fs: Filesystem, source: Path, dest: Path) -> int:
    """Recursively copy a directory, overwriting existing files.

    Returns:
        Number of files copied
    """
    fs.mkdir(dest)
    copied = 0
    for child in fs.list_dir(source):
        child_dest = dest / child.name
        if fs.is_dir(child):
            copied += copy_tree(fs, child, child_dest)
        else:
            fs.copy_file(child, child_dest)
            copied += 1
    return copied


def copy_declared(
    fs: Filesystem,
    source_dir: Path,
    target_dir: Path,
    file_map: Mapping[str, str],
    feedback: UserFeedback,
) -> list[str]:
    """Copy the descriptor's declared files, in declaration order.

    Missing sources are reported as warnings and skipped. Directories are
    copied recursively. Single files overwrite whatever is at the destination.

    Args:
        fs: Filesystem to operate on
        source_dir: Bundle directory that `file_map` keys are relative to
        target_dir: Skill directory that `file_map` values are relative to
        file_map: Mapping of source path to destination path
        feedback: Receives one warning per missing source

    Returns:
        Source entries that were copied
    """
    copied: list[str] = []
    for source_rel, dest_rel in file_map.items():
        source = _join_inside(source_dir, source_rel)
        dest = _join_inside(target_dir, dest_rel)

        if not fs.exists(source):
            feedback.warning(f"{source_rel} not found, skipping")
            continue

        if fs.is_dir(source):
            count = copy_tree(fs, source, dest)
            logger.debug("Copied directory %s -> %s (%d files)", source, dest, count)
            feedback.success(f"✓ Copied directory: {source_rel}")
        else:
            fs.mkdir(dest.parent)
            fs.copy_file(source, dest)
            feedback.success(f"✓ Copied file: {source_rel}")
        copied.append(source_rel)
    return copied


def remove_all(fs: Filesystem, target_dir: Path) -> bool:
    """Recursively delete target_dir and everything under it.

    Symbolic links are unlinked, never descended into, so nothing outside
    target_dir is touched.

    Returns:
        True if something was removed, False if target_dir did not exist
    """
    if fs.is_symlink(target_dir):
        fs.remove_file(target_dir)
        return True
    if not fs.exists(target_dir):
        return False
    if not fs.is_dir(target_dir):
        fs.remove_file(target_dir)
        return True

    for child in fs.list_dir(target_dir):
        remove_all(fs, child)
    fs.remove_dir(target_dir)
    return True
