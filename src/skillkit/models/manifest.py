"""Models for .skills-manifest.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MANIFEST_FILENAME = ".skills-manifest.json"


class ManifestEntry(BaseModel):
    """One installed skill as recorded in the manifest."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str | None = None
    installed_at: str = Field(alias="installedAt")
    package: str
    path: str

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used on disk."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SkillsManifest(BaseModel):
    """Registry of skills installed under one skills directory."""

    model_config = ConfigDict(frozen=True)

    skills: dict[str, ManifestEntry] = Field(default_factory=dict)

    @staticmethod
    def empty() -> "SkillsManifest":
        return SkillsManifest(skills={})

    def with_entry(self, name: str, entry: ManifestEntry) -> "SkillsManifest":
        """Return new manifest with the entry for `name` replaced."""
        return SkillsManifest(skills={**self.skills, name: entry})

    def without_entry(self, name: str) -> "SkillsManifest":
        """Return new manifest without an entry for `name`."""
        return SkillsManifest(skills={k: v for k, v in self.skills.items() if k != name})

    def to_json_dict(self) -> dict[str, Any]:
        return {"skills": {name: entry.to_json_dict() for name, entry in self.skills.items()}}
