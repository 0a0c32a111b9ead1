from skillkit.integrations.time.abc import Time
from skillkit.integrations.time.real import RealTime

__all__ = ["RealTime", "Time"]
