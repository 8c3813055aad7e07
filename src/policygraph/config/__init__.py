"""
Configuration layer for policygraph.

Configuration in policygraph is:
- Explicit (passed, not global)
- Typed (frozen dataclasses)
- Optionally sourced from POLICYGRAPH_* environment variables via
  load_config()
"""

from policygraph.config.settings import (
    GraphConfig,
    AssemblyConfig,
    PolicyGraphConfig,
)
from policygraph.config.loader import load_config

__all__ = [
    "GraphConfig",
    "AssemblyConfig",
    "PolicyGraphConfig",
    "load_config",
]
