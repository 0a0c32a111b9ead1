from skillkit.integrations.hook_runner.abc import HookRunner
from skillkit.integrations.hook_runner.real import RealHookRunner

__all__ = ["HookRunner", "RealHookRunner"]
