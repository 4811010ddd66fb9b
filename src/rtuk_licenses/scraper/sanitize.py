"""Text normalisation for values pulled out of the portal's HTML."""

from __future__ import annotations

import re

from rtuk_licenses.scraper.config import HTML_COMMENT_MARKERS

_CONTROL_CHARS_RE = re.compile(r"[\n\t\r]")
_SPACE_RUN_RE = re.compile(r" {2,}")


def replace_literal(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old`` in ``text`` with ``new``.

    ``old`` is escaped before compiling, so parentheses and other regex
    metacharacters match literally instead of acting as groups.
    """
    if not old:
        return text
    return re.sub(re.escape(old), lambda _match: new, text)


def clean_text(text: str) -> str:
    """Remove newlines, tabs and carriage returns, collapse space runs, trim."""
    text = _CONTROL_CHARS_RE.sub("", text)
    text = _SPACE_RUN_RE.sub(" ", text)
    return text.strip()


def strip_parentheses(text: str) -> str:
    """Drop ``(`` and ``)``; ``"(İNTERNET)"`` becomes ``"İNTERNET"``."""
    return replace_literal(replace_literal(text, "(", ""), ")", "")


def strip_comment_markers(text: str) -> str:
    """Remove ``<!--`` and ``-->`` markers, keeping the content between them."""
    for marker in HTML_COMMENT_MARKERS:
        text = replace_literal(text, marker, "")
    return text
