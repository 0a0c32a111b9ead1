from skillkit.models.location import InstallLocation, InstallScope, validate_install_scope
from skillkit.models.manifest import MANIFEST_FILENAME, ManifestEntry, SkillsManifest
from skillkit.models.skill import DEFAULT_PACKAGE_SCOPE, SkillConfig, SkillHooks

__all__ = [
    "DEFAULT_PACKAGE_SCOPE",
    "InstallLocation",
    "InstallScope",
    "MANIFEST_FILENAME",
    "ManifestEntry",
    "SkillConfig",
    "SkillHooks",
    "SkillsManifest",
    "validate_install_scope",
]
