from __future__ import annotations

import logging

import requests

from .errors import TransportError


class HtmlFetcher:
    """Fetches HTML documents over a shared requests session.

    Unauthenticated, no retries. A non-2xx response is a transport failure.
    """

    DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'

    def __init__(self, user_agent: str = None, timeout: float | None = 30):
        self.user_agent = user_agent or self.DEFAULT_USER_AGENT
        self.timeout = timeout
        self.logger = logging.getLogger('scraper.atcoder')
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({
            'User-Agent': self.user_agent,
            'Accept': 'text/html',
            'Accept-Encoding': 'gzip',
        })
        return session

    def get_html(self, url: str) -> str:
        self.logger.info(f"GET {url}")
        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self.logger.warning(f"Request failed with HTTP {status}: {url}")
            raise TransportError(f"HTTP {status} for {url}", url=url, status_code=status) from e
        except requests.RequestException as e:
            self.logger.warning(f"Request failed: {url}: {e}")
            raise TransportError(f"Request failed for {url}: {e}", url=url) from e
        return resp.text

    def close(self):
        self.session.close()
