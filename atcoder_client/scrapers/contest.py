"""Contest archive page (``/contests/archive``) scraper."""
from __future__ import annotations

import logging

from bs4 import Tag

from .common import Contest
from .extract import (
    Column, Field, cell_text, first_link, link_tail, parse_duration,
    parse_localized_datetime, scrape_rows,
)

logger = logging.getLogger(__name__)


def _contest_title(node: Tag) -> str:
    return cell_text(first_link(node))


# Columns: start time, contest name, duration, rated range
CONTEST_FIELDS = (
    Field('start_epoch_second', Column(0), lambda td: parse_localized_datetime(cell_text(td))),
    Field('id', Column(1), link_tail),
    Field('title', Column(1), _contest_title),
    Field('duration_second', Column(2), lambda td: parse_duration(cell_text(td))),
    Field('rate_change', Column(3), cell_text),
)


def scrape(html_text: str) -> list[Contest]:
    contests = [Contest(**values) for values in scrape_rows(html_text, CONTEST_FIELDS)]
    logger.debug(f"Scraped {len(contests)} contests")
    return contests
