from __future__ import annotations
import os
from typing import Optional


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = int(raw.strip())
    if value <= 0:
        raise ValueError(f"{var} must be a positive integer, got {raw!r}")
    return value


def get_max_depth() -> Optional[int]:
    # None means no limit beyond the interpreter's own stack
    return int_from_env('MDEXPR_MAX_DEPTH')
