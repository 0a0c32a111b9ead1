"""Rich rendering for install summaries and failures."""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from skillkit.operations.lifecycle import InstallResult

TROUBLESHOOTING = (
    "Ensure .claude-skill.json exists and is valid JSON",
    "Ensure SKILL.md exists",
    "Check file permissions for ~/.claude directory",
    "Try running with elevated privileges for global installation (if needed)",
)


def _stderr_console() -> Console:
    return Console(stderr=True, highlight=False)


def _skill_label(result: InstallResult) -> str:
    if result.skill.version:
        return f"{result.skill.name} v{result.skill.version}"
    return result.skill.name


def format_install_summary(result: InstallResult) -> Panel:
    """Format the success box shown after an install.

    Args:
        result: Completed install

    Returns:
        Rich Panel with location, scope and hook status
    """
    lines = [
        Text(f"Skill: {_skill_label(result)}"),
        Text(f"Location: {result.target_dir}"),
        Text(f"Type: {result.location.scope} skill"),
    ]
    if result.hook_failed:
        lines.append(Text("postinstall hook failed (install kept)", style="yellow"))

    return Panel(
        Text("\n").join(lines),
        title="✅ Skill installed successfully!",
        border_style="green",
        padding=(1, 2),
    )


def format_failure(message: str) -> Panel:
    """Format the fatal install error with the troubleshooting checklist."""
    lines = [Text(message, style="red"), Text(""), Text("Troubleshooting:", style="bold")]
    lines.extend(Text(f"- {item}") for item in TROUBLESHOOTING)
    return Panel(
        Text("\n").join(lines),
        title="❌ Failed to install skill",
        border_style="red",
        padding=(1, 2),
    )


def render_install_summary(result: InstallResult) -> None:
    console = _stderr_console()
    console.print(format_install_summary(result))
    console.print("\n📖 Usage:")
    console.print('Ask Claude: "What skills are available?"')


def render_failure(message: str) -> None:
    _stderr_console().print(format_failure(message))
