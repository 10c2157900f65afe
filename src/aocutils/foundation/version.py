from __future__ import annotations

from functools import lru_cache
from importlib import metadata


@lru_cache(maxsize=None)
def get_version() -> str:
    """Installed version of the aocutils distribution."""
    try:
        return metadata.version("aocutils")
    except metadata.PackageNotFoundError:  # pragma: no cover - source checkout without install
        return "0.0.0+unknown"


__all__ = ["get_version"]
