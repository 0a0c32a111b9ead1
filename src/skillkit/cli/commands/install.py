"""Install command."""

import click

from skillkit.cli.rendering import render_install_summary
from skillkit.context import SkillKitContext
from skillkit.error_boundary import cli_error_boundary
from skillkit.operations.lifecycle import install_skill


@click.command("install")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: SkillKitContext) -> None:
    """Install the bundled skill.

    Copies SKILL.md and the files declared in .claude-skill.json into
    <skills-dir>/<name>/, records the skill in .skills-manifest.json and runs
    the postinstall hook if one is declared. Running it again reinstalls.

    Examples:

        # Install into the current project
        skillkit install

        # Install for the current user
        SKILLKIT_GLOBAL=true skillkit install
    """
    ctx.feedback.info("📦 Installing Claude Code Skill...\n")
    result = install_skill(ctx)
    render_install_summary(result)
