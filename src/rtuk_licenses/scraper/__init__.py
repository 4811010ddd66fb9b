"""Scraper for the RTÜK licensing portal.

Sub-modules:
- ``config``        — endpoints, form payloads, request headers, selectors
- ``sanitize``      — text normalisation helpers
- ``http_fetcher``  — httpx-based single-request fetcher
- ``table_parser``  — declarative positional parsing of the result tables
- ``writer``        — JSON serialisation of records
- ``pipeline``      — fetch → parse → write orchestration per category
"""
