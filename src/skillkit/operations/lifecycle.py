"""Install and uninstall flows for a bundled skill.

Install:   resolve location -> copy SKILL.md -> copy declared files
           -> update manifest -> run postinstall hook
Uninstall: resolve location -> remove skill directory -> update manifest

Install raises SkillKitError (or OSError) on fatal failures. Uninstall is
best effort: every failure becomes a warning and the flow returns normally.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from skillkit.context import SkillKitContext
from skillkit.errors import (
    DescriptorInvalidError,
    DescriptorMissingError,
    HookExecutionError,
    ManifestWriteError,
)
from skillkit.integrations.time.abc import format_timestamp
from skillkit.io import (
    build_manifest_entry,
    load_manifest,
    load_skill_config,
    manifest_path,
    remove_entry,
    save_manifest,
    upsert_entry,
)
from skillkit.models import InstallLocation, SkillConfig
from skillkit.operations.location import resolve_install_location
from skillkit.operations.materialize import copy_declared, copy_required, remove_all

logger = logging.getLogger(__name__)

UninstallOutcome = Literal["removed", "not_installed", "skipped", "remove_failed"]


@dataclass(frozen=True)
class InstallResult:
    """Outcome of a completed install."""

    skill: SkillConfig
    location: InstallLocation
    target_dir: Path
    copied_files: list[str]
    installed_at: str
    hook_exit_code: int | None

    @property
    def hook_failed(self) -> bool:
        return self.hook_exit_code is not None and self.hook_exit_code != 0


@dataclass(frozen=True)
class UninstallResult:
    """Outcome of a best-effort uninstall.

    skill and location are None when the descriptor could not be loaded.
    """

    outcome: UninstallOutcome
    skill: SkillConfig | None
    location: InstallLocation | None
    target_dir: Path | None
    manifest_updated: bool


def _resolve(ctx: SkillKitContext) -> InstallLocation:
    return resolve_install_location(
        ctx.fs,
        global_install=ctx.config.global_install,
        cwd=ctx.cwd,
        home=ctx.home,
    )


def _run_postinstall(ctx: SkillKitContext, command: str, target_dir: Path) -> int:
    """Run the postinstall hook, converting any failure into a warning.

    Returns:
        The hook's exit code, or -1 if it could not be started
    """
    ctx.feedback.info("\n🔧 Running postinstall hook...")
    try:
        exit_code = ctx.hook_runner.run(command, target_dir)
    except HookExecutionError as e:
        ctx.feedback.warning(f"postinstall hook failed: {e}")
        return -1

    if exit_code != 0:
        ctx.feedback.warning(f"postinstall hook failed: '{command}' exited with status {exit_code}")
    return exit_code


def install_skill(ctx: SkillKitContext) -> InstallResult:
    """Install the skill bundled in ctx.config.bundle_dir.

    Installing again with the same descriptor overwrites files and the
    manifest entry.

    Raises:
        DescriptorMissingError: If the bundle has no descriptor
        DescriptorInvalidError: If the descriptor is not valid
        RequiredFileMissingError: If the bundle has no SKILL.md
        ManifestWriteError: If the manifest cannot be written
        OSError: If skill files cannot be written
    """
    bundle_dir = ctx.config.bundle_dir
    logger.debug("Loading skill descriptor from %s", bundle_dir)
    skill = load_skill_config(ctx.fs, bundle_dir)

    location = _resolve(ctx)
    target_dir = location.skill_dir(skill.name)
    logger.debug("Resolved location: scope=%s base=%s", location.scope, location.base)

    ctx.feedback.info(f"Installation type: {location.scope}")
    ctx.feedback.info(f"Target directory: {target_dir}\n")

    copy_required(ctx.fs, bundle_dir, target_dir)
    ctx.feedback.success("✓ Copied SKILL.md")

    copied = copy_declared(ctx.fs, bundle_dir, target_dir, skill.files, ctx.feedback)
    logger.debug("Copied %d of %d declared file entries", len(copied), len(skill.files))

    installed_at = format_timestamp(ctx.time.now())
    manifest = load_manifest(ctx.fs, location.base, ctx.feedback)
    entry = build_manifest_entry(skill, target_dir, installed_at)
    save_manifest(ctx.fs, location.base, upsert_entry(manifest, skill.name, entry))
    logger.debug("Recorded %s in %s", skill.name, manifest_path(location.base))

    hook_exit_code: int | None = None
    if skill.postinstall:
        hook_exit_code = _run_postinstall(ctx, skill.postinstall, target_dir)

    return InstallResult(
        skill=skill,
        location=location,
        target_dir=target_dir,
        copied_files=copied,
        installed_at=installed_at,
        hook_exit_code=hook_exit_code,
    )


def _remove_from_manifest(ctx: SkillKitContext, location: InstallLocation, name: str) -> bool:
    """Drop `name` from an existing manifest. Never creates a manifest."""
    if not ctx.fs.is_file(manifest_path(location.base)):
        return False

    manifest = load_manifest(ctx.fs, location.base, ctx.feedback)
    if name not in manifest.skills:
        return False

    try:
        save_manifest(ctx.fs, location.base, remove_entry(manifest, name))
    except ManifestWriteError as e:
        ctx.feedback.warning(f"Could not update manifest: {e.cause}")
        return False

    ctx.feedback.success("✓ Updated manifest")
    return True


def uninstall_skill(ctx: SkillKitContext) -> UninstallResult:
    """Remove the skill bundled in ctx.config.bundle_dir.

    Never raises for expected failures; they are reported through
    ctx.feedback as warnings.
    """
    try:
        skill = load_skill_config(ctx.fs, ctx.config.bundle_dir)
    except (DescriptorMissingError, DescriptorInvalidError) as e:
        ctx.feedback.warning(f"{e}, skipping cleanup")
        return UninstallResult(
            outcome="skipped",
            skill=None,
            location=None,
            target_dir=None,
            manifest_updated=False,
        )

    location = _resolve(ctx)
    target_dir = location.skill_dir(skill.name)
    logger.debug("Resolved location: scope=%s base=%s", location.scope, location.base)
    ctx.feedback.info(f"Uninstalling from: {target_dir}")

    if not ctx.fs.exists(target_dir):
        ctx.feedback.info("ℹ️  Skill was not installed, nothing to remove")
        return UninstallResult(
            outcome="not_installed",
            skill=skill,
            location=location,
            target_dir=target_dir,
            manifest_updated=False,
        )

    try:
        remove_all(ctx.fs, target_dir)
    except OSError as e:
        ctx.feedback.warning(f"Could not remove {target_dir}: {e}")
        return UninstallResult(
            outcome="remove_failed",
            skill=skill,
            location=location,
            target_dir=target_dir,
            manifest_updated=False,
        )
    ctx.feedback.success("✓ Removed skill directory")

    manifest_updated = _remove_from_manifest(ctx, location, skill.name)

    return UninstallResult(
        outcome="removed",
        skill=skill,
        location=location,
        target_dir=target_dir,
        manifest_updated=manifest_updated,
    )
