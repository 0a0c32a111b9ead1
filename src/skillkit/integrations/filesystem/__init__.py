from skillkit.integrations.filesystem.abc import Filesystem
from skillkit.integrations.filesystem.real import RealFilesystem

__all__ = ["Filesystem", "RealFilesystem"]
