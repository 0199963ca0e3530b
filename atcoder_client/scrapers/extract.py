"""Field extraction primitives shared by the record scrapers.

Every helper either returns a value or raises :class:`HtmlParseError`
(element missing) / :class:`ValueParseError` (text present but unparsable).
A table row is described declaratively as a tuple of :class:`Field` entries;
each field is located either by column position (:class:`Column`) or by an
``href`` pattern anywhere in the row (:class:`RowLink`).
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Sequence

from bs4 import BeautifulSoup, Tag

from .errors import HtmlParseError, ValueParseError

DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S%z'

_UNSIGNED_RE = re.compile(r'\d+', re.ASCII)
_DURATION_RE = re.compile(r'(\d+):(\d{2})', re.ASCII)
_DATETIME_RE = re.compile(r'\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}[+-]\d{4}', re.ASCII)
_FLOAT_RE = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?', re.ASCII)


def parse_document(html_text: str) -> BeautifulSoup:
    return BeautifulSoup(html_text, 'html.parser')


def table_rows(soup: BeautifulSoup) -> list[Tag]:
    """Return the rows of the first ``<tbody>`` in document order."""
    tbody = soup.find('tbody')
    if tbody is None:
        raise HtmlParseError("No <tbody> found in document")
    return tbody.find_all('tr')


def nth_cell(cells: Sequence[Tag], n: int) -> Tag:
    if n < len(cells):
        return cells[n]
    raise HtmlParseError(f"Row has {len(cells)} cells, expected at least {n + 1}")


def cell_text(node: Tag) -> str:
    """First non-blank text fragment inside ``node``, stripped."""
    text = next(node.stripped_strings, None)
    if text is None:
        raise HtmlParseError(f"No text inside <{node.name}>")
    return text


def link_href(anchor: Tag) -> str:
    href = anchor.get('href')
    if href is None:
        raise HtmlParseError("Anchor has no href attribute")
    return href


def first_link(scope: Tag) -> Tag:
    anchor = scope.find('a')
    if anchor is None:
        raise HtmlParseError(f"No <a> inside <{scope.name}>")
    return anchor


def first_matching_link(scope: Tag, pattern: re.Pattern) -> Tag:
    """First anchor under ``scope`` whose href matches ``pattern``."""
    for anchor in scope.find_all('a', href=True):
        if pattern.search(anchor['href']):
            return anchor
    raise HtmlParseError(f"No link matching {pattern.pattern!r}")


def url_tail(href: str) -> str:
    return href.rsplit('/', 1)[-1]


def link_tail(node: Tag) -> str:
    """Tail segment of the first anchor's href under ``node``."""
    return url_tail(link_href(first_link(node)))


def parse_unsigned(text: str) -> int:
    value = text.strip()
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValueParseError(f"Not an unsigned integer: {text!r}")
    return int(value)


def parse_float(text: str) -> float:
    value = text.strip()
    if not _FLOAT_RE.fullmatch(value):
        raise ValueParseError(f"Not a number: {text!r}")
    return float(value)


def parse_localized_datetime(text: str, fmt: str = DATETIME_FORMAT) -> int:
    """Parse ``2019-07-20 21:00:00+0900`` into seconds since the epoch."""
    value = text.strip()
    if fmt == DATETIME_FORMAT and not _DATETIME_RE.fullmatch(value):
        raise ValueParseError(f"Bad timestamp {text!r}")
    try:
        dt = datetime.strptime(value, fmt)
    except ValueError as e:
        raise ValueParseError(f"Bad timestamp {text!r}: {e}") from e
    if dt.tzinfo is None:
        raise ValueParseError(f"Timestamp has no UTC offset: {text!r}")
    return int(dt.timestamp())


def strip_unit_and_parse_int(text: str, unit: str) -> int:
    """Drop a trailing unit literal ("Byte", "ms") and parse what is left."""
    value = text.strip()
    if unit and value.endswith(unit):
        value = value[:-len(unit)]
    return parse_unsigned(value)


def parse_duration(text: str) -> int:
    """``HH:MM`` to seconds. Hours are unbounded (long contests run for days)."""
    m = _DURATION_RE.fullmatch(text.strip())
    if not m:
        raise ValueParseError(f"Bad duration {text!r}")
    return int(m.group(1)) * 3600 + int(m.group(2)) * 60


_REQUIRED = object()


@dataclass(frozen=True)
class Column:
    """Locate a field by its cell position in the row."""

    index: int

    def locate(self, row: Tag, cells: Sequence[Tag]) -> Tag:
        return nth_cell(cells, self.index)


@dataclass(frozen=True)
class RowLink:
    """Locate a field by the first anchor in the row whose href matches."""

    pattern: re.Pattern

    def locate(self, row: Tag, cells: Sequence[Tag]) -> Tag:
        return first_matching_link(row, self.pattern)


@dataclass(frozen=True)
class Field:
    name: str
    source: Column | RowLink
    convert: Callable[[Tag], Any]
    # Fields with a default are best-effort: any extraction failure yields it.
    default: Any = _REQUIRED

    @property
    def best_effort(self) -> bool:
        return self.default is not _REQUIRED


def extract_row(row: Tag, fields: Sequence[Field]) -> dict[str, Any]:
    """Apply a row schema, returning ``{field name: value}``.

    The first required field that fails aborts with the same error class,
    annotated with the field name.
    """
    cells = row.find_all('td')
    values = {}
    for field in fields:
        try:
            values[field.name] = field.convert(field.source.locate(row, cells))
        except HtmlParseError as e:
            if field.best_effort:
                values[field.name] = field.default
                continue
            raise e.__class__(
                f"{field.name}: {e}", context={**e.context, 'field': field.name}
            ) from e
    return values


def scrape_rows(html_text: str, fields: Sequence[Field]) -> list[dict[str, Any]]:
    """Extract every row of the first table; one bad row fails the whole call."""
    values = []
    for i, row in enumerate(table_rows(parse_document(html_text))):
        try:
            values.append(extract_row(row, fields))
        except HtmlParseError as e:
            raise e.__class__(f"row {i}: {e}", context={**e.context, 'row': i}) from e
    return values
