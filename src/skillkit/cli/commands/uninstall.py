"""Uninstall command."""

import click

from skillkit.context import SkillKitContext
from skillkit.errors import SkillKitError
from skillkit.operations.lifecycle import uninstall_skill


@click.command("uninstall")
@click.pass_obj
def uninstall_cmd(ctx: SkillKitContext) -> None:
    """Remove the bundled skill and its manifest entry.

    Uninstall is best effort and always exits 0; problems are reported as
    warnings. Use the same SKILLKIT_GLOBAL value and working directory as
    the install, otherwise a different skills directory is targeted.
    """
    ctx.feedback.info("🗑️  Uninstalling Claude Code Skill...\n")
    try:
        result = uninstall_skill(ctx)
    except (SkillKitError, OSError) as e:
        ctx.feedback.warning(f"Problem during uninstall: {e}")
        return

    if result.outcome == "removed":
        ctx.feedback.success("\n✅ Skill uninstalled successfully!")
