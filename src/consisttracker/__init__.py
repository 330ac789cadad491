"""ConsistTracker habit tracking package."""

from __future__ import annotations

from .config import BaseConfig
from .context import AppContext, create_app_context

__version__ = "0.1.0"

__all__ = ["AppContext", "BaseConfig", "create_app_context"]
