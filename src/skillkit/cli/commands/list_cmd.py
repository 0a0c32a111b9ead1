"""List command for showing installed skills."""

import json

import click

from skillkit.context import SkillKitContext
from skillkit.io import load_manifest
from skillkit.operations.location import resolve_install_location
from skillkit.output import machine_output, user_output


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print the manifest as JSON on stdout")
@click.pass_obj
def list_cmd(ctx: SkillKitContext, as_json: bool) -> None:
    """List skills recorded in the manifest for the current scope."""
    location = resolve_install_location(
        ctx.fs,
        global_install=ctx.config.global_install,
        cwd=ctx.cwd,
        home=ctx.home,
    )
    manifest = load_manifest(ctx.fs, location.base, ctx.feedback)

    if as_json:
        machine_output(json.dumps(manifest.to_json_dict(), indent=2, ensure_ascii=False))
        return

    if len(manifest.skills) == 0:
        user_output(f"No skills installed in {location.base}")
        return

    user_output(f"Installed {len(manifest.skills)} {location.scope} skill(s) in {location.base}:\n")
    for name, entry in manifest.skills.items():
        version = entry.version or "-"
        user_output(
            f"  {name:<20} {version:<10} {entry.package:<30} {entry.installed_at}  {entry.path}"
        )
