"""Installer configuration from environment variables."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

GLOBAL_INSTALL_ENV_VAR = "SKILLKIT_GLOBAL"
BUNDLE_DIR_ENV_VAR = "SKILLKIT_BUNDLE_DIR"
DEBUG_ENV_VAR = "SKILLKIT_DEBUG"

_TRUTHY = ("true", "1", "yes")


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "false").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class InstallerConfig:
    """Installer configuration loaded from environment variables.

    Loaded once at CLI entry point and stored in SkillKitContext.
    """

    global_install: bool
    bundle_dir: Path
    debug: bool

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "InstallerConfig":
        """Load configuration from environment variables.

        Args:
            environ: Environment mapping (defaults to os.environ)

        Returns:
            InstallerConfig with values read from the environment
        """
        env = os.environ if environ is None else environ
        bundle_dir = env.get(BUNDLE_DIR_ENV_VAR)
        return InstallerConfig(
            global_install=_env_flag(env, GLOBAL_INSTALL_ENV_VAR),
            bundle_dir=Path(bundle_dir).expanduser().resolve() if bundle_dir else Path.cwd(),
            debug=_env_flag(env, DEBUG_ENV_VAR),
        )
