"""Application-wide exception hierarchy for the RTÜK license crawler.

All custom exceptions subclass ``LicenseCrawlerError``, so callers can catch
the entire hierarchy with a single ``except`` clause when needed.

Hierarchy::

    LicenseCrawlerError
    ├── FetchError         (url, phase)  transport failure, step is skipped
    ├── HTMLParseError     (url)         fatal
    └── RecordWriteError   (path)        fatal
"""

from __future__ import annotations


class LicenseCrawlerError(Exception):
    """Base class for all license crawler exceptions."""


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------


class FetchError(LicenseCrawlerError):
    """Raised when an HTTP fetch against the licensing portal fails.

    The orchestrator logs this error and skips the affected pipeline step;
    it never aborts the whole run.

    Args:
        message: Human-readable description of the failure.
        url: Target URL of the failed request.
        phase: Which part of the exchange failed: ``"build"`` (request
            construction), ``"send"`` (execution) or ``"read"`` (body read).
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        phase: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.phase = phase


# ---------------------------------------------------------------------------
# Fatal errors
# ---------------------------------------------------------------------------


class HTMLParseError(LicenseCrawlerError):
    """Raised when a response body cannot be read by the HTML parser.

    Args:
        message: Description of the parser failure.
        url: Source URL of the document, when known.
    """

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class RecordWriteError(LicenseCrawlerError):
    """Raised when records cannot be serialized or written to disk.

    Args:
        message: Description of the failure.
        path: Destination file path.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
