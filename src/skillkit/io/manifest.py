"""Skills manifest (.skills-manifest.json) I/O.

The manifest is external state shared between invocations. Callers always
re-read it before mutating and never cache it across operations.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from skillkit.errors import ManifestWriteError
from skillkit.integrations.feedback.abc import UserFeedback
from skillkit.integrations.filesystem.abc import Filesystem
from skillkit.models import MANIFEST_FILENAME, ManifestEntry, SkillConfig, SkillsManifest

logger = logging.getLogger(__name__)


def manifest_path(base: Path) -> Path:
    return base / MANIFEST_FILENAME


def load_manifest(fs: Filesystem, base: Path, feedback: UserFeedback) -> SkillsManifest:
    """Load the manifest for a skills directory.

    A missing file yields an empty manifest. An unreadable or malformed file
    also yields an empty manifest after a warning; it is replaced on the next
    save.

    Args:
        fs: Filesystem to read from
        base: Skills directory containing the manifest
        feedback: Receives the warning for a corrupt manifest

    Returns:
        Loaded manifest, or an empty one
    """
    path = manifest_path(base)
    if not fs.is_file(path):
        return SkillsManifest.empty()

    try:
        return SkillsManifest.model_validate_json(fs.read_text(path))
    except (OSError, ValueError, ValidationError):
        logger.debug("Failed to load manifest %s", path, exc_info=True)
        feedback.warning(f"Could not parse existing manifest {path}, treating it as empty")
        return SkillsManifest.empty()


def build_manifest_entry(skill: SkillConfig, skill_dir: Path, installed_at: str) -> ManifestEntry:
    """Create the manifest entry recorded for an installed skill."""
    return ManifestEntry(
        version=skill.version,
        installed_at=installed_at,
        package=skill.package_name,
        path=str(skill_dir),
    )


def upsert_entry(manifest: SkillsManifest, name: str, entry: ManifestEntry) -> SkillsManifest:
    """Return manifest with the entry for `name` replaced by `entry`."""
    return manifest.with_entry(name, entry)


def remove_entry(manifest: SkillsManifest, name: str) -> SkillsManifest:
    """Return manifest without `name`. Unknown names are ignored."""
    if name not in manifest.skills:
        return manifest
    return manifest.without_entry(name)


def save_manifest(fs: Filesystem, base: Path, manifest: SkillsManifest) -> None:
    """Write the manifest as pretty-printed JSON, creating `base` if needed.

    Raises:
        ManifestWriteError: If the directory or file cannot be written
    """
    path = manifest_path(base)
    content = json.dumps(manifest.to_json_dict(), indent=2, ensure_ascii=False) + "\n"
    try:
        fs.mkdir(base)
        fs.write_text(path, content)
    except OSError as e:
        raise ManifestWriteError(path, e) from e
    logger.debug("Wrote manifest %s with %d skill(s)", path, len(manifest.skills))
