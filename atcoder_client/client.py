"""Client facade: one fetch per request, parsing delegated to the scrapers."""
from __future__ import annotations

import logging

from .config import get_config
from .scrapers import contest, problem, submission
from .scrapers.base import HtmlFetcher
from .scrapers.common import ContestListResponse, ProblemListResponse, SubmissionListResponse

logger = logging.getLogger(__name__)


class AtCoderClient:
    """A client for the public AtCoder pages.

    Example::

        client = AtCoderClient()
        response = client.fetch_problem_list('abc107')
        len(response.problems)  # 4
    """

    def __init__(self, fetcher: HtmlFetcher = None, config=None):
        self.config = config or get_config()
        self.base_url = self.config.BASE_URL
        self.fetcher = fetcher or HtmlFetcher(
            user_agent=self.config.USER_AGENT,
            timeout=self.config.REQUEST_TIMEOUT,
        )

    def fetch_contest_list(self, page: int = 1) -> ContestListResponse:
        url = f"{self.base_url}/contests/archive?lang={self.config.ARCHIVE_LANG}&page={page}"
        html_text = self.fetcher.get_html(url)
        contests = contest.scrape(html_text)
        logger.info(f"Fetched {len(contests)} contests from archive page {page}")
        return ContestListResponse(contests=contests)

    def fetch_problem_list(self, contest_id: str) -> ProblemListResponse:
        url = f"{self.base_url}/contests/{contest_id}/tasks"
        html_text = self.fetcher.get_html(url)
        problems = problem.scrape(html_text, contest_id)
        logger.info(f"Fetched {len(problems)} problems for {contest_id}")
        return ProblemListResponse(problems=problems)

    def fetch_submission_list(self, contest_id: str, page: int = None) -> SubmissionListResponse:
        """Fetch one page of a contest's submissions plus the listing's page count."""
        if page is None:
            page = 1
        url = f"{self.base_url}/contests/{contest_id}/submissions?page={page}"
        html_text = self.fetcher.get_html(url)
        submissions = submission.scrape(html_text, contest_id)
        max_page = submission.scrape_submission_page_count(html_text)
        logger.info(
            f"Fetched {len(submissions)} submissions for {contest_id} "
            f"(page {page}/{max_page})"
        )
        return SubmissionListResponse(max_page=max_page, submissions=submissions)

    def fetch_submission_code(self, contest_id: str, submission_id: int) -> str:
        url = f"{self.base_url}/contests/{contest_id}/submissions/{submission_id}"
        html_text = self.fetcher.get_html(url)
        return submission.scrape_submission_code(html_text)

    def close(self):
        self.fetcher.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
