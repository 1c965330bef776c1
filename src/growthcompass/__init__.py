from __future__ import annotations

import sys as _sys

if _sys.version_info < (3, 11):
    raise RuntimeError(f"growthcompass requires Python 3.11+; detected {_sys.version.split()[0]}")

__all__: list[str] = []
