"""Shared package version helpers."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

from syoryouma import __version__


@lru_cache(maxsize=1)
def get_version() -> str:
    """Return the installed version, or the source tree version when not installed."""
    try:
        return version("syo-ryo-uma")
    except PackageNotFoundError:
        return __version__


__all__ = ["get_version"]
