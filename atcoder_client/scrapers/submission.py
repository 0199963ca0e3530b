"""Submission listing and submission detail page scrapers."""
from __future__ import annotations

import logging
import re

from bs4 import Tag

from .common import Submission
from .errors import HtmlParseError
from .extract import (
    Column, Field, RowLink, cell_text, link_href, link_tail, parse_document,
    parse_float, parse_localized_datetime, parse_unsigned, scrape_rows,
    strip_unit_and_parse_int, url_tail,
)

logger = logging.getLogger(__name__)

# ".../submissions/12345" (the detail link, not the filter links)
SUBMISSION_DETAIL_RE = re.compile(r'submissions/\d+$')
PAGE_LINK_RE = re.compile(r'page=(\d+)$')


def _submission_id(anchor: Tag) -> int:
    return parse_unsigned(url_tail(link_href(anchor)))


# Listing columns: time, task, user, language, score, code size, status,
# exec time, memory, detail. Memory is not scraped.
SUBMISSION_FIELDS = (
    Field('epoch_second', Column(0), lambda td: parse_localized_datetime(cell_text(td))),
    Field('problem_id', Column(1), link_tail),
    Field('user_id', Column(2), link_tail),
    Field('language', Column(3), cell_text, default=''),
    Field('point', Column(4), lambda td: parse_float(cell_text(td))),
    Field('length', Column(5), lambda td: strip_unit_and_parse_int(cell_text(td), 'Byte')),
    Field('result', Column(6), cell_text),
    Field('execution_time', Column(7),
          lambda td: strip_unit_and_parse_int(cell_text(td), 'ms'), default=None),
    Field('id', RowLink(SUBMISSION_DETAIL_RE), _submission_id),
)


def scrape(html_text: str, contest_id: str) -> list[Submission]:
    submissions = [
        Submission(contest_id=contest_id, **values)
        for values in scrape_rows(html_text, SUBMISSION_FIELDS)
    ]
    logger.debug(f"Scraped {len(submissions)} submissions for {contest_id}")
    return submissions


def scrape_submission_page_count(html_text: str) -> int:
    """Highest ``page=N`` referenced by any link on a listing page.

    A listing without pagination links raises, same as a broken page.
    """
    pages = []
    for anchor in parse_document(html_text).find_all('a', href=True):
        m = PAGE_LINK_RE.search(anchor['href'])
        if m:
            pages.append(int(m.group(1)))
    if not pages:
        raise HtmlParseError("No pagination links found")
    return max(pages)


def scrape_submission_code(html_text: str) -> str:
    """Source code text of ``pre#submission-code`` on a submission detail page."""
    pre_tag = parse_document(html_text).find('pre', id='submission-code')
    if pre_tag is None:
        raise HtmlParseError("No <pre id=\"submission-code\"> found")
    code = pre_tag.get_text()
    if not code:
        raise HtmlParseError("Submission code block is empty")
    return code
