"""Pydantic models for the records written to disk.

Sub-modules:
    licenses — InternetStreamLicense, SatelliteBroadcastingLicense
"""

from __future__ import annotations
