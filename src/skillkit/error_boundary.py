"""Error boundary handling for CLI commands.

Catches well-known failures at CLI entry points and displays a diagnostic
with a troubleshooting checklist instead of a stack trace.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from skillkit.cli.rendering import render_failure
from skillkit.errors import SkillKitError

logger = logging.getLogger(__name__)


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that turns fatal skill errors into exit status 1.

    Catches:
        - SkillKitError: missing/invalid descriptor, missing SKILL.md,
          unwritable manifest
        - OSError: files that could not be created or copied

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @cli_error_boundary
        def install():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SkillKitError as e:
            logger.debug("Fatal skill error", exc_info=True)
            render_failure(str(e))
            raise SystemExit(1) from None
        except OSError as e:
            logger.debug("Fatal filesystem error", exc_info=True)
            render_failure(str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
