"""I/O operations for skillkit."""

from skillkit.io.descriptor import DESCRIPTOR_FILENAME, load_skill_config
from skillkit.io.manifest import (
    build_manifest_entry,
    load_manifest,
    manifest_path,
    remove_entry,
    save_manifest,
    upsert_entry,
)

__all__ = [
    "DESCRIPTOR_FILENAME",
    "build_manifest_entry",
    "load_manifest",
    "load_skill_config",
    "manifest_path",
    "remove_entry",
    "save_manifest",
    "upsert_entry",
]
