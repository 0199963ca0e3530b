from __future__ import annotations

import re
from dataclasses import dataclass, field, asdict
from enum import Enum


class SubmissionStatus(str, Enum):
    AC = 'AC'
    WA = 'WA'
    TLE = 'TLE'
    MLE = 'MLE'
    RE = 'RE'
    CE = 'CE'
    UNKNOWN = 'UNKNOWN'
    PENDING = 'PENDING'
    JUDGING = 'JUDGING'


# AtCoder result label to status mapping
_RESULT_STATUS_MAP = {
    'AC': SubmissionStatus.AC,
    'WA': SubmissionStatus.WA,
    'TLE': SubmissionStatus.TLE,
    'MLE': SubmissionStatus.MLE,
    'RE': SubmissionStatus.RE,
    'OLE': SubmissionStatus.RE,      # Treat OLE as RE
    'CE': SubmissionStatus.CE,
    'IE': SubmissionStatus.UNKNOWN,  # Internal Error
    'WJ': SubmissionStatus.PENDING,  # Waiting for Judge
    'WR': SubmissionStatus.PENDING,  # Waiting for Rejudge
}

# "3/20 TLE" or "3/20" while test cases are still running
_PROGRESS_RE = re.compile(r'^\d+\s*/\s*\d+')


def map_status(raw_result: str) -> SubmissionStatus:
    """Map an AtCoder result label to a SubmissionStatus."""
    if not raw_result:
        return SubmissionStatus.UNKNOWN
    text = raw_result.strip()
    if _PROGRESS_RE.match(text) or text == '...':
        return SubmissionStatus.JUDGING
    return _RESULT_STATUS_MAP.get(text, SubmissionStatus.UNKNOWN)


@dataclass(frozen=True)
class Submission:
    id: int
    epoch_second: int
    problem_id: str
    contest_id: str
    user_id: str
    language: str
    point: float
    length: int
    result: str
    execution_time: int | None = None
    code: str = ''

    @property
    def status(self) -> SubmissionStatus:
        return map_status(self.result)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Contest:
    id: str
    start_epoch_second: int
    duration_second: int
    title: str
    rate_change: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Problem:
    id: str
    contest_id: str
    title: str
    position: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ContestListResponse:
    contests: list[Contest] = field(default_factory=list)


@dataclass(frozen=True)
class ProblemListResponse:
    problems: list[Problem] = field(default_factory=list)


@dataclass(frozen=True)
class SubmissionListResponse:
    max_page: int
    submissions: list[Submission] = field(default_factory=list)
