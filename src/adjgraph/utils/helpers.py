from __future__ import annotations

import numpy as np

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)


def is_integer(value: object) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, np.integer))


def is_vertex_id(value: object) -> bool:
    return is_integer(value) and int(value) >= 0


def is_int32(value: object) -> bool:
    return is_integer(value) and INT32_MIN <= int(value) <= INT32_MAX
