import logging
from dataclasses import replace
from pathlib import Path

import click

from skillkit import __version__
from skillkit.cli.commands.install import install_cmd
from skillkit.cli.commands.list_cmd import list_cmd
from skillkit.cli.commands.uninstall import uninstall_cmd
from skillkit.config import BUNDLE_DIR_ENV_VAR, DEBUG_ENV_VAR, InstallerConfig
from skillkit.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--bundle-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar=BUNDLE_DIR_ENV_VAR,
    help="Directory containing .claude-skill.json and SKILL.md (default: current directory)",
)
@click.option("--debug", is_flag=True, envvar=DEBUG_ENV_VAR, help="Show debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only show warnings and errors")
@click.pass_context
def cli(ctx: click.Context, bundle_dir: Path | None, debug: bool, quiet: bool) -> None:
    """Install Claude skills into ~/.claude/skills or <project>/.claude/skills.

    Set SKILLKIT_GLOBAL=true to install for the current user instead of the
    current project.
    """
    config = InstallerConfig.from_env()
    if bundle_dir is not None:
        config = replace(config, bundle_dir=bundle_dir.resolve())
    if debug:
        config = replace(config, debug=True)

    if config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(config, quiet=quiet)


cli.add_command(install_cmd)
cli.add_command(uninstall_cmd)
cli.add_command(list_cmd)


def main() -> None:
    """CLI entry point used by the `skillkit` console script."""
    cli()
