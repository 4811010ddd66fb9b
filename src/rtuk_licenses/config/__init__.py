"""Configuration package for the RTÜK license crawler.

Re-exports the settings symbols so that callers can write::

    from rtuk_licenses.config import Settings, get_settings
"""

from __future__ import annotations

from rtuk_licenses.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
