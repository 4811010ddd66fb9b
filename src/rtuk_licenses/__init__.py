"""Crawler for the RTÜK broadcast-license listings.

Fetches the licensing portal's HTML result tables, turns each row into a
typed license record and writes the records to JSON files.
"""

__version__ = "0.1.0"
