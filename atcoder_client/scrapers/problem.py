"""Task list page (``/contests/<id>/tasks``) scraper."""
from __future__ import annotations

import logging

from .common import Problem
from .extract import Column, Field, cell_text, first_link, link_tail, scrape_rows

logger = logging.getLogger(__name__)

PROBLEM_FIELDS = (
    Field('position', Column(0), cell_text),
    Field('id', Column(1), link_tail),
    Field('title', Column(1), lambda td: cell_text(first_link(td))),
)


def scrape(html_text: str, contest_id: str) -> list[Problem]:
    problems = [
        Problem(contest_id=contest_id, **values)
        for values in scrape_rows(html_text, PROBLEM_FIELDS)
    ]
    logger.debug(f"Scraped {len(problems)} problems for {contest_id}")
    return problems
