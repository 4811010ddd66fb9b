"""Positional HTML table parsing for the portal's license listings.

Both result endpoints render one Bootstrap table
(``table.table.table-bordered.table-condensed.table-hover``) whose body rows
hold one license each.  Columns carry no usable headers, so values are
picked by cell position.  Each listing is described declaratively by a
:class:`TableLayout`: a list of :class:`ColumnRule` entries mapping a cell
index to a record field and an extraction function.  A markup change is
then a change to the layout table, not to the row walker.

Cell indexing follows the row's *descendant* ``td`` elements in document
order, so cells of a nested sub-table are counted too.  Negative indices
count from the end of the row.  Rules whose cell does not exist in the row
are skipped and the field keeps its default.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag
from pydantic import BaseModel

from rtuk_licenses.core.exceptions import HTMLParseError
from rtuk_licenses.core.schemas.licenses import (
    DEFAULT_INTERNET_LICENSE_TYPE,
    InternetStreamLicense,
    SatelliteBroadcastingLicense,
)
from rtuk_licenses.scraper.config import RESULT_BODY_SELECTOR
from rtuk_licenses.scraper.sanitize import clean_text, strip_parentheses

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

_INTEGER_RE = re.compile(r"[+-]?\d+")


# ---------------------------------------------------------------------------
# Cell extractors
# ---------------------------------------------------------------------------


def _joined_text(elements: Sequence[Tag]) -> str:
    return "".join(element.get_text() for element in elements)


def cell_text(cell: Tag) -> str:
    """Sanitized text of the whole cell."""
    return clean_text(cell.get_text())


def label_int(cell: Tag) -> int:
    """Integer value of the cell's ``label`` text.

    Non-numeric or missing text yields ``0``.  This is the published
    coercion policy for row ids; it never raises.
    """
    text = clean_text(_joined_text(cell.find_all("label")))
    if not _INTEGER_RE.fullmatch(text):
        return 0
    return int(text)


def span_title(cell: Tag) -> str:
    """Sanitized ``title`` attribute of the first nested ``span``, or ``""``."""
    span = cell.find("span")
    if span is None:
        return ""
    return clean_text(span.get("title", ""))


def span_text(cell: Tag) -> str:
    """Sanitized text of every nested ``span``."""
    return clean_text(_joined_text(cell.find_all("span")))


def subtable_text(cell: Tag) -> str:
    """Sanitized text of the cells of a table nested inside ``cell``."""
    return clean_text(_joined_text(cell.select("table tr td")))


def license_type_text(cell: Tag) -> str:
    """Sanitized cell text with parentheses removed."""
    return strip_parentheses(cell_text(cell))


def satellite_address(row: Tag) -> dict[str, Any]:
    """Address from ``td small i`` when the row has more than one ``td small``."""
    if len(row.select("td small")) > 1:
        return {"address": clean_text(_joined_text(row.select("td small i")))}
    return {}


# ---------------------------------------------------------------------------
# Layout description
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ColumnRule:
    """Maps one cell position to one record field.

    Attributes:
        index: Cell position; negative values count from the end of the row.
        field: Record field name that receives the value.
        extract: Function turning the cell into the field value.
    """

    index: int
    field: str
    extract: Callable[[Tag], Any]


@dataclass(frozen=True)
class TableLayout:
    """Declarative description of one result table.

    Attributes:
        name: Short label used in log messages.
        columns: Column rules, applied in order; a later rule for the same
            field overwrites an earlier one.
        min_cells: Column rules only run on rows with at least this many cells.
        row_rules: Functions of the whole row returning extra field values.
            They run on every row, regardless of ``min_cells``.
        defaults: Field values applied when the field is still empty after
            all rules ran.
    """

    name: str
    columns: tuple[ColumnRule, ...]
    min_cells: int = 0
    row_rules: tuple[Callable[[Tag], dict[str, Any]], ...] = ()
    defaults: dict[str, Any] = field(default_factory=dict)


INTERNET_STREAM_LAYOUT = TableLayout(
    name="internet_stream",
    columns=(
        ColumnRule(0, "id", label_int),
        ColumnRule(1, "name", span_title),
        ColumnRule(2, "url", cell_text),
        ColumnRule(3, "full_name", cell_text),
        ColumnRule(4, "license", cell_text),
        ColumnRule(5, "start_date", cell_text),
        ColumnRule(6, "end_date", cell_text),
        # Two markup variants put the type in either cell; cell 8 wins.
        ColumnRule(7, "license_type", license_type_text),
        ColumnRule(8, "license_type", license_type_text),
    ),
    defaults={"license_type": DEFAULT_INTERNET_LICENSE_TYPE},
)

SATELLITE_LAYOUT = TableLayout(
    name="satellite",
    columns=(
        ColumnRule(0, "id", label_int),
        ColumnRule(1, "name", span_title),
        ColumnRule(2, "license", span_text),
        ColumnRule(3, "broadcast_branding", cell_text),
        ColumnRule(4, "license_type", cell_text),
        ColumnRule(-1, "license_detail", cell_text),
        ColumnRule(6, "start_date", subtable_text),
        ColumnRule(8, "end_date", cell_text),
    ),
    min_cells=2,
    row_rules=(satellite_address,),
)


# ---------------------------------------------------------------------------
# Row walker
# ---------------------------------------------------------------------------


def load_document(html: str, url: str | None = None) -> BeautifulSoup:
    """Parse ``html`` with the html5lib tree builder.

    html5lib follows the HTML5 tree construction rules: a missing ``tbody``
    is implied and an unclosed ``td`` or ``tr`` ends where the next one
    starts, so cells never swallow their neighbours.

    Raises:
        HTMLParseError: If the parser rejects the markup.
    """
    try:
        return BeautifulSoup(html, "html5lib")
    except ParserRejectedMarkup as exc:
        raise HTMLParseError(f"cannot parse HTML document: {exc}", url=url) from exc


def result_rows(soup: BeautifulSoup) -> list[Tag]:
    """Return the body rows of every result table in document order.

    Rows of tables nested inside a body cell are included.
    """
    return [
        row for body in soup.select(RESULT_BODY_SELECTOR) for row in body.find_all("tr")
    ]


def extract_row(row: Tag, layout: TableLayout) -> dict[str, Any]:
    """Apply ``layout`` to a single row and return the field values."""
    values: dict[str, Any] = {}
    cells = row.find_all("td")
    count = len(cells)

    if count >= layout.min_cells:
        for rule in layout.columns:
            if -count <= rule.index < count:
                values[rule.field] = rule.extract(cells[rule.index])

    for row_rule in layout.row_rules:
        values.update(row_rule(row))

    for name, default in layout.defaults.items():
        if not values.get(name):
            values[name] = default

    return values


def iter_records(
    soup: BeautifulSoup, layout: TableLayout, model: type[RecordT]
) -> Iterator[RecordT]:
    """Yield one ``model`` instance per body row, in row order."""
    for row in result_rows(soup):
        yield model.model_validate(extract_row(row, layout))


# ---------------------------------------------------------------------------
# Public parsers
# ---------------------------------------------------------------------------


def parse_internet_stream_licenses(
    html: str, url: str | None = None
) -> list[InternetStreamLicense]:
    """Parse the internet stream (platform) license table.

    Every body row produces a record; no filtering is applied.

    Args:
        html: Response body with comment markers already removed.
        url: Source URL, used in error messages only.

    Raises:
        HTMLParseError: If the document cannot be parsed.
    """
    soup = load_document(html, url)
    licenses = list(iter_records(soup, INTERNET_STREAM_LAYOUT, InternetStreamLicense))
    logger.debug("parser: %d %s rows", len(licenses), INTERNET_STREAM_LAYOUT.name)
    return licenses


def parse_satellite_broadcasting_licenses(
    html: str, url: str | None = None
) -> list[SatelliteBroadcastingLicense]:
    """Parse the satellite broadcasting license table (TV or radio).

    Rows of a single cell (section separators, nested sub-table rows) only
    go through the address rule.  Records whose name, address and id are
    all empty are dropped.

    Args:
        html: Response body with comment markers already removed.
        url: Source URL, used in error messages only.

    Raises:
        HTMLParseError: If the document cannot be parsed.
    """
    soup = load_document(html, url)
    parsed = list(iter_records(soup, SATELLITE_LAYOUT, SatelliteBroadcastingLicense))
    licenses = [record for record in parsed if not record.is_empty]
    logger.debug(
        "parser: %d %s rows, %d dropped as empty",
        len(parsed),
        SATELLITE_LAYOUT.name,
        len(parsed) - len(licenses),
    )
    return licenses
