"""Tests for InstallerConfig.from_env."""

from pathlib import Path

import pytest

from skillkit.config import InstallerConfig


def test_defaults_to_project_scope_and_cwd() -> None:
    config = InstallerConfig.from_env({})

    assert config.global_install is False
    assert config.bundle_dir == Path.cwd()
    assert config.debug is False


@pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes", " True "])
def test_global_flag_truthy_values(value: str) -> None:
    assert InstallerConfig.from_env({"SKILLKIT_GLOBAL": value}).global_install is True


@pytest.mark.parametrize("value", ["false", "0", "", "no", "maybe"])
def test_global_flag_falsy_values(value: str) -> None:
    assert InstallerConfig.from_env({"SKILLKIT_GLOBAL": value}).global_install is False


def test_bundle_dir_is_resolved(tmp_path: Path) -> None:
    config = InstallerConfig.from_env({"SKILLKIT_BUNDLE_DIR": str(tmp_path / "b" / "..")})

    assert config.bundle_dir == tmp_path.resolve()


def test_debug_flag() -> None:
    assert InstallerConfig.from_env({"SKILLKIT_DEBUG": "true"}).debug is True
