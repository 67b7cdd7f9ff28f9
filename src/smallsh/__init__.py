"""smallsh - a small interactive command interpreter."""

from .config import Settings, get_settings
from .shell import Shell

__version__ = "0.1.0"

__all__ = ["Settings", "Shell", "get_settings"]
