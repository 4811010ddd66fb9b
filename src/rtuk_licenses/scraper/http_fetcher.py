"""HTTP fetcher for the licensing portal's result endpoints.

Uses ``httpx`` for all HTTP requests.  Each call performs exactly one
request with the portal's fixed header set; there are no retries.  Failures
are raised as :class:`~rtuk_licenses.core.exceptions.FetchError` tagged with
the phase that failed so the caller can log it and move on.
"""

from __future__ import annotations

import logging
import time

import httpx

from rtuk_licenses.core.exceptions import FetchError
from rtuk_licenses.scraper.config import (
    DEFAULT_TIMEOUT,
    FORM_CONTENT_TYPE,
    REQUEST_HEADERS,
)
from rtuk_licenses.scraper.sanitize import strip_comment_markers

logger = logging.getLogger(__name__)


def build_headers(has_payload: bool) -> dict[str, str]:
    """Return the request headers, adding the form content type for bodies."""
    headers = dict(REQUEST_HEADERS)
    if has_payload:
        headers["Content-Type"] = FORM_CONTENT_TYPE
    return headers


def _read_body(response: httpx.Response, deadline: float, timeout: float) -> str:
    chunks: list[bytes] = []
    for chunk in response.iter_bytes():
        chunks.append(chunk)
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout(f"timeout after {timeout}s", request=response.request)
    return b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")


def fetch_page(
    method: str,
    url: str,
    payload: str | None = None,
    *,
    client: httpx.Client,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Send one request and return the response body as text.

    HTML comment markers (``<!--`` / ``-->``) are stripped from the body
    before it is returned; some responses wrap the result table in a comment
    and the parsers expect to see it as live markup.

    ``timeout`` bounds the whole exchange, as a single deadline: httpx's own
    timeouts apply per connect, write and read operation, so the body is read
    in chunks and the read fails once the deadline has passed.

    A status code of 400 or above is logged but not treated as a failure:
    the portal reports errors as HTML fragments, which simply parse to no
    records.

    Args:
        method: HTTP method, e.g. ``"POST"``.
        url: Target URL.
        payload: Form-url-encoded body (``"key=value&key2=value2"``), or
            ``None`` for a request without a body.
        client: Shared :class:`httpx.Client` instance.
        timeout: Deadline for the whole exchange, in seconds.

    Returns:
        The decoded response body with comment markers removed.

    Raises:
        FetchError: With ``phase`` set to ``"build"``, ``"send"`` or
            ``"read"`` depending on where the exchange failed.
    """
    deadline = time.monotonic() + timeout
    try:
        request = client.build_request(
            method,
            url,
            content=payload.encode("utf-8") if payload is not None else None,
            headers=build_headers(payload is not None),
            timeout=timeout,
        )
    except (httpx.HTTPError, httpx.InvalidURL, ValueError, TypeError) as exc:
        raise FetchError(
            f"failed to create HTTP request: {exc}", url=url, phase="build"
        ) from exc

    try:
        response = client.send(request, stream=True)
    except httpx.TimeoutException as exc:
        raise FetchError(
            f"failed to execute request: timeout after {timeout}s", url=url, phase="send"
        ) from exc
    except httpx.RequestError as exc:
        raise FetchError(
            f"failed to execute request: {exc}", url=url, phase="send"
        ) from exc

    try:
        body = _read_body(response, deadline, timeout)
    except (httpx.HTTPError, LookupError) as exc:
        raise FetchError(
            f"failed to read response body: {exc}", url=url, phase="read"
        ) from exc
    finally:
        response.close()

    if response.status_code >= 400:
        logger.warning("fetcher: HTTP %d for %s", response.status_code, url)

    logger.debug("fetcher: %s %s -> %d (%d chars)", method, url, response.status_code, len(body))
    return strip_comment_markers(body)
