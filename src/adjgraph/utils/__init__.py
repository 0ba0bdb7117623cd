"""
Utility functions for adjgraph.

Low-level value checks shared across the package.
No graph logic should live here.
"""

from adjgraph.utils.helpers import (
    INT32_MIN,
    INT32_MAX,
    is_integer,
    is_vertex_id,
    is_int32,
)

__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "is_integer",
    "is_vertex_id",
    "is_int32",
]
