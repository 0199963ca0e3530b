from .common import (
    Contest, ContestListResponse, Problem, ProblemListResponse, Submission,
    SubmissionListResponse, SubmissionStatus, map_status,
)
from .errors import HtmlParseError, ScrapeError, TransportError, ValueParseError
from .base import HtmlFetcher

__all__ = [
    'Contest', 'ContestListResponse', 'Problem', 'ProblemListResponse',
    'Submission', 'SubmissionListResponse', 'SubmissionStatus', 'map_status',
    'HtmlParseError', 'ScrapeError', 'TransportError', 'ValueParseError',
    'HtmlFetcher',
]
