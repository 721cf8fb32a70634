"""Toolkit core: configuration, errors, shared types and the facade."""

from .config import ToolkitConfig
from .toolkit import Toolkit

__all__ = ["Toolkit", "ToolkitConfig"]
