"""Tests for reading and writing .skills-manifest.json."""

import json
from pathlib import Path

import pytest

from skillkit.errors import ManifestWriteError
from skillkit.integrations.feedback.fake import FakeUserFeedback
from skillkit.integrations.filesystem.fake import FakeFilesystem
from skillkit.io import (
    build_manifest_entry,
    load_manifest,
    manifest_path,
    remove_entry,
    save_manifest,
    upsert_entry,
)
from skillkit.models import ManifestEntry, SkillConfig, SkillsManifest

BASE = Path("/p/.claude/skills")


def _entry(version: str = "1.0.0") -> ManifestEntry:
    return ManifestEntry(
        version=version,
        installed_at="2025-01-02T03:04:05.678Z",
        package="@antskill/demo",
        path=str(BASE / "demo"),
    )


def test_load_missing_manifest_returns_empty_without_warning() -> None:
    feedback = FakeUserFeedback()

    manifest = load_manifest(FakeFilesystem(), BASE, feedback)

    assert manifest.skills == {}
    assert feedback.warnings == []


def test_load_reads_entries() -> None:
    content = json.dumps(
        {
            "skills": {
                "demo": {
                    "version": "1.0.0",
                    "installedAt": "2025-01-02T03:04:05.678Z",
                    "package": "@antskill/demo",
                    "path": "/p/.claude/skills/demo",
                }
            }
        }
    )
    fs = FakeFilesystem(files={manifest_path(BASE): content})

    manifest = load_manifest(fs, BASE, FakeUserFeedback())

    assert manifest.skills == {"demo": _entry()}


@pytest.mark.parametrize(
    "content",
    ["not json at all", "[]", '{"skills": []}', '{"skills": {"demo": {"version": "1"}}}'],
)
def test_load_corrupt_manifest_warns_once_and_returns_empty(content: str) -> None:
    fs = FakeFilesystem(files={manifest_path(BASE): content})
    feedback = FakeUserFeedback()

    manifest = load_manifest(fs, BASE, feedback)

    assert manifest.skills == {}
    assert len(feedback.warnings) == 1
    assert "Could not parse existing manifest" in feedback.warnings[0]
    assert "creating new one" not in feedback.warnings[0]


def test_upsert_replaces_existing_entry() -> None:
    manifest = SkillsManifest.empty().with_entry("demo", _entry("1.0.0"))

    updated = upsert_entry(manifest, "demo", _entry("2.0.0"))

    assert len(updated.skills) == 1
    assert updated.skills["demo"].version == "2.0.0"


def test_remove_unknown_entry_is_noop() -> None:
    manifest = SkillsManifest.empty().with_entry("demo", _entry())

    assert remove_entry(manifest, "other") is manifest
    assert remove_entry(manifest, "demo").skills == {}


def test_build_manifest_entry_uses_skill_metadata() -> None:
    skill = SkillConfig(name="demo", version="1.0.0")

    entry = build_manifest_entry(skill, BASE / "demo", "2025-01-02T03:04:05.678Z")

    assert entry == _entry()


def test_save_writes_pretty_json_and_creates_base() -> None:
    fs = FakeFilesystem()
    manifest = SkillsManifest.empty().with_entry("demo", _entry())

    save_manifest(fs, BASE, manifest)

    content = fs.read_text(manifest_path(BASE))
    assert content.endswith("}\n")
    assert '\n  "skills": {\n' in content
    assert json.loads(content) == {
        "skills": {
            "demo": {
                "version": "1.0.0",
                "installedAt": "2025-01-02T03:04:05.678Z",
                "package": "@antskill/demo",
                "path": "/p/.claude/skills/demo",
            }
        }
    }


def test_save_to_unwritable_location_raises_manifest_write_error() -> None:
    fs = FakeFilesystem(fail_writes_under=[Path("/p")])

    with pytest.raises(ManifestWriteError, match="Could not write manifest"):
        save_manifest(fs, BASE, SkillsManifest.empty())
