"""Skill descriptor models loaded from .claude-skill.json."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PACKAGE_SCOPE = "@antskill"


class SkillHooks(BaseModel):
    """Lifecycle hooks declared by a skill."""

    model_config = ConfigDict(frozen=True)

    postinstall: str | None = None


class SkillConfig(BaseModel):
    """Skill descriptor read from the bundle.

    `files` maps a path relative to the bundle directory to a path relative
    to the installed skill directory. Order is preserved from the JSON object.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str | None = None
    package: str | None = None
    files: dict[str, str] = Field(default_factory=dict)
    hooks: SkillHooks = Field(default_factory=SkillHooks)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that would escape the skills directory."""
        if not v.strip():
            msg = "Skill name must not be empty"
            raise ValueError(msg)
        if "/" in v or "\\" in v or v in (".", ".."):
            msg = f"Skill name must be a single path component: {v}"
            raise ValueError(msg)
        return v

    @property
    def package_name(self) -> str:
        """Package identifier recorded in the manifest."""
        if self.package:
            return self.package
        return f"{DEFAULT_PACKAGE_SCOPE}/{self.name}"

    @property
    def postinstall(self) -> str | None:
        return self.hooks.postinstall
