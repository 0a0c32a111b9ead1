"""Tests for copying skill files and removing skill directories over FakeFilesystem."""

from pathlib import Path

import pytest

from skillkit.errors import RequiredFileMissingError
from skillkit.integrations.feedback.fake import FakeUserFeedback
from skillkit.integrations.filesystem.fake import FakeFilesystem
from skillkit.integrations.filesystem.real import RealFilesystem
from skillkit.operations.materialize import copy_declared, copy_required, copy_tree, remove_all

SOURCE = Path("/bundle")
TARGET = Path("/p/.claude/skills/demo")


def test_copy_required_creates_target_and_copies_skill_md() -> None:
    fs = FakeFilesystem(files={SOURCE / "SKILL.md": "# Demo"})

    dest = copy_required(fs, SOURCE, TARGET)

    assert dest == TARGET / "SKILL.md"
    assert fs.read_text(dest) == "# Demo"


def test_copy_required_missing_source_raises_without_creating_target() -> None:
    fs = FakeFilesystem(directories=[SOURCE])

    with pytest.raises(RequiredFileMissingError, match="SKILL.md is required"):
        copy_required(fs, SOURCE, TARGET)

    assert not fs.exists(TARGET)


def test_copy_declared_skips_missing_source_with_one_warning() -> None:
    fs = FakeFilesystem(files={SOURCE / "a.txt": "A"}, directories=[TARGET])
    feedback = FakeUserFeedback()

    copied = copy_declared(
        fs, SOURCE, TARGET, {"a.txt": "a.txt", "missing.txt": "m.txt"}, feedback
    )

    assert copied == ["a.txt"]
    assert fs.read_text(TARGET / "a.txt") == "A"
    assert not fs.exists(TARGET / "m.txt")
    assert feedback.warnings == ["missing.txt not found, skipping"]


def test_copy_declared_creates_destination_parents() -> None:
    fs = FakeFilesystem(files={SOURCE / "README.md": "readme"}, directories=[TARGET])

    copy_declared(fs, SOURCE, TARGET, {"README.md": "docs/guide/README.md"}, FakeUserFeedback())

    assert fs.read_text(TARGET / "docs/guide/README.md") == "readme"


def test_copy_declared_copies_directories_recursively() -> None:
    fs = FakeFilesystem(
        files={
            SOURCE / "templates/commit.md": "c",
            SOURCE / "templates/nested/deep/pr.md": "p",
        },
        directories=[SOURCE / "templates/empty", TARGET],
    )

    copy_declared(fs, SOURCE, TARGET, {"templates": "tpl"}, FakeUserFeedback())

    assert fs.read_text(TARGET / "tpl/commit.md") == "c"
    assert fs.read_text(TARGET / "tpl/nested/deep/pr.md") == "p"
    assert fs.is_dir(TARGET / "tpl/empty")


def test_copy_declared_overwrites_existing_file() -> None:
    fs = FakeFilesystem(files={SOURCE / "a.txt": "new", TARGET / "a.txt": "old"})

    copy_declared(fs, SOURCE, TARGET, {"a.txt": "a.txt"}, FakeUserFeedback())

    assert fs.read_text(TARGET / "a.txt") == "new"


def test_copy_declared_follows_declaration_order() -> None:
    fs = FakeFilesystem(
        files={SOURCE / "z.txt": "z", SOURCE / "a.txt": "a"}, directories=[TARGET]
    )

    copy_declared(fs, SOURCE, TARGET, {"z.txt": "z.txt", "a.txt": "a.txt"}, FakeUserFeedback())

    assert [dest for _, dest in fs.copy_calls] == [TARGET / "z.txt", TARGET / "a.txt"]


def test_copy_declared_write_failure_leaves_earlier_files() -> None:
    fs = FakeFilesystem(
        files={SOURCE / "a.txt": "a", SOURCE / "b.txt": "b"},
        directories=[TARGET],
        fail_writes_under=[TARGET / "locked"],
    )

    with pytest.raises(PermissionError):
        copy_declared(
            fs, SOURCE, TARGET, {"a.txt": "a.txt", "b.txt": "locked/b.txt"}, FakeUserFeedback()
        )

    assert fs.read_text(TARGET / "a.txt") == "a"


def test_copy_declared_keeps_absolute_destination_inside_skill_dir() -> None:
    fs = FakeFilesystem(files={SOURCE / "a.txt": "A"}, directories=[TARGET])

    copy_declared(fs, SOURCE, TARGET, {"a.txt": "/tmp/escaped.txt"}, FakeUserFeedback())

    assert fs.read_text(TARGET / "tmp/escaped.txt") == "A"
    assert not fs.exists(Path("/tmp/escaped.txt"))


def test_copy_declared_reads_absolute_source_from_bundle() -> None:
    fs = FakeFilesystem(
        files={SOURCE / "etc/notes.md": "bundled", Path("/etc/notes.md"): "host"},
        directories=[TARGET],
    )

    copied = copy_declared(fs, SOURCE, TARGET, {"/etc/notes.md": "notes.md"}, FakeUserFeedback())

    assert copied == ["/etc/notes.md"]
    assert fs.read_text(TARGET / "notes.md") == "bundled"


def test_copy_tree_counts_files() -> None:
    fs = FakeFilesystem(files={SOURCE / "d/1": "", SOURCE / "d/2": "", SOURCE / "d/e/3": ""})

    assert copy_tree(fs, SOURCE / "d", TARGET / "d") == 3


def test_remove_all_deletes_whole_tree() -> None:
    fs = FakeFilesystem(
        files={TARGET / "SKILL.md": "", TARGET / "tpl/a.md": "", Path("/p/.claude/skills/x"): ""},
        directories=[TARGET / "tpl/empty"],
    )

    assert remove_all(fs, TARGET) is True

    assert not fs.exists(TARGET)
    assert fs.is_file(Path("/p/.claude/skills/x"))


def test_remove_all_missing_directory_is_noop() -> None:
    fs = FakeFilesystem()

    assert remove_all(fs, TARGET) is False
    assert fs.removed_paths == []


def test_remove_all_propagates_failure_part_way() -> None:
    fs = FakeFilesystem(
        files={TARGET / "a.md": "", TARGET / "locked/b.md": ""},
        fail_removals_under=[TARGET / "locked"],
    )

    with pytest.raises(PermissionError):
        remove_all(fs, TARGET)

    assert fs.is_file(TARGET / "locked/b.md")


def test_remove_all_unlinks_symlinked_directory_without_touching_target() -> None:
    outside = Path("/p/shared")
    fs = FakeFilesystem(
        files={TARGET / "SKILL.md": "", outside / "precious.txt": "keep"},
        symlinks={TARGET / "docs": outside},
    )

    assert remove_all(fs, TARGET) is True

    assert not fs.exists(TARGET)
    assert fs.read_text(outside / "precious.txt") == "keep"
    assert TARGET / "docs" in fs.removed_paths


def test_remove_all_on_disk_leaves_link_targets_alone(tmp_path: Path) -> None:
    skill = tmp_path / "skill"
    outside = tmp_path / "outside"
    (skill / "tpl").mkdir(parents=True)
    outside.mkdir()
    (skill / "SKILL.md").write_text("# Skill", encoding="utf-8")
    (outside / "precious.txt").write_text("keep", encoding="utf-8")
    (skill / "docs").symlink_to(outside, target_is_directory=True)
    (skill / "tpl" / "notes.md").symlink_to(outside / "precious.txt")
    (skill / "dangling").symlink_to(tmp_path / "gone")

    assert remove_all(RealFilesystem(), skill) is True

    assert not skill.exists()
    assert (outside / "precious.txt").read_text(encoding="utf-8") == "keep"
