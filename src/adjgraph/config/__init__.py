"""
Configuration layer for adjgraph.

Configuration in adjgraph is:
- Explicit (passed to the Graph, not global)
- Typed (validated at construction time)
- Overridable from ADJGRAPH_* environment variables
"""

from adjgraph.config.settings import GraphConfig
from adjgraph.config.loader import load_config, load_settings

__all__ = [
    "GraphConfig",
    "load_config",
    "load_settings",
]
