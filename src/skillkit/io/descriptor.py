"""Skill descriptor (.claude-skill.json) I/O."""

import json
from pathlib import Path

from pydantic import ValidationError

from skillkit.errors import DescriptorInvalidError, DescriptorMissingError
from skillkit.integrations.filesystem.abc import Filesystem
from skillkit.models import SkillConfig

DESCRIPTOR_FILENAME = ".claude-skill.json"


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"]) or "<root>"
        parts.append(f"{location}: {detail['msg']}")
    return "; ".join(parts)


def load_skill_config(fs: Filesystem, bundle_dir: Path) -> SkillConfig:
    """Load the skill descriptor bundled next to the installer.

    Args:
        fs: Filesystem to read from
        bundle_dir: Directory containing .claude-skill.json

    Returns:
        Parsed SkillConfig

    Raises:
        DescriptorMissingError: If the descriptor file does not exist
        DescriptorInvalidError: If it is not valid JSON or fails validation
    """
    config_path = bundle_dir / DESCRIPTOR_FILENAME
    if not fs.is_file(config_path):
        raise DescriptorMissingError(config_path)

    try:
        data = json.loads(fs.read_text(config_path))
    except json.JSONDecodeError as e:
        raise DescriptorInvalidError(
            config_path, f"not valid JSON ({e.msg} at line {e.lineno})"
        ) from e

    if not isinstance(data, dict):
        raise DescriptorInvalidError(config_path, "top-level value must be a JSON object")

    try:
        return SkillConfig.model_validate(data)
    except ValidationError as e:
        raise DescriptorInvalidError(config_path, _describe_validation_error(e)) from e
