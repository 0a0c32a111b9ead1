"""Application context with dependency injection.

SkillKitContext holds every dependency the install and uninstall flows touch
(filesystem, hook runner, clock, user feedback, configuration). It is created
once at the CLI entry point and threaded through via Click's context object.
"""

from dataclasses import dataclass
from pathlib import Path

from skillkit.config import InstallerConfig
from skillkit.integrations.feedback.abc import UserFeedback
from skillkit.integrations.feedback.real import InteractiveFeedback, SuppressedFeedback
from skillkit.integrations.filesystem.abc import Filesystem
from skillkit.integrations.filesystem.real import RealFilesystem
from skillkit.integrations.hook_runner.abc import HookRunner
from skillkit.integrations.hook_runner.real import RealHookRunner
from skillkit.integrations.time.abc import Time
from skillkit.integrations.time.real import RealTime


@dataclass(frozen=True)
class SkillKitContext:
    """Immutable context holding all dependencies for skill operations.

    Attributes:
        fs: Filesystem operations
        hook_runner: Runs postinstall hook commands
        time: Clock used for manifest timestamps
        feedback: User-facing diagnostics
        config: Installer configuration (scope flag, bundle dir, debug)
        cwd: Working directory the project root search starts from
        home: User home directory for personal installs
    """

    fs: Filesystem
    hook_runner: HookRunner
    time: Time
    feedback: UserFeedback
    config: InstallerConfig
    cwd: Path
    home: Path

    @staticmethod
    def for_test(
        fs: Filesystem | None = None,
        hook_runner: HookRunner | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        config: InstallerConfig | None = None,
        cwd: Path | None = None,
        home: Path | None = None,
    ) -> "SkillKitContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes for every unspecified dependency so no test touches disk
        or spawns processes unless it asks to.

        Args:
            fs: Optional Filesystem. If None, creates empty FakeFilesystem.
            hook_runner: Optional HookRunner. If None, creates FakeHookRunner.
            time: Optional Time. If None, creates FakeTime.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            config: Optional InstallerConfig. If None, project scope with
                bundle dir /test/bundle.
            cwd: Working directory (defaults to /test/project)
            home: Home directory (defaults to /test/home)

        Example:
            >>> fs = FakeFilesystem(files={Path("/test/bundle/SKILL.md"): "# s"})
            >>> ctx = SkillKitContext.for_test(fs=fs)
        """
        from skillkit.integrations.feedback.fake import FakeUserFeedback
        from skillkit.integrations.filesystem.fake import FakeFilesystem
        from skillkit.integrations.hook_runner.fake import FakeHookRunner
        from skillkit.integrations.time.fake import FakeTime

        if fs is None:
            fs = FakeFilesystem()

        if hook_runner is None:
            hook_runner = FakeHookRunner()

        if time is None:
            time = FakeTime()

        if feedback is None:
            feedback = FakeUserFeedback()

        if config is None:
            config = InstallerConfig(
                global_install=False,
                bundle_dir=Path("/test/bundle"),
                debug=False,
            )

        return SkillKitContext(
            fs=fs,
            hook_runner=hook_runner,
            time=time,
            feedback=feedback,
            config=config,
            cwd=cwd if cwd is not None else Path("/test/project"),
            home=home if home is not None else Path("/test/home"),
        )


def create_context(config: InstallerConfig, *, quiet: bool = False) -> SkillKitContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Args:
        config: Installer configuration resolved from environment and options
        quiet: If True, suppress informational output
    """
    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()
    return SkillKitContext(
        fs=RealFilesystem(),
        hook_runner=RealHookRunner(),
        time=RealTime(),
        feedback=feedback,
        config=config,
        cwd=Path.cwd(),
        home=Path.home(),
    )
