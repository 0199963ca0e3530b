import logging
import os
from logging.handlers import RotatingFileHandler

from atcoder_client.client import AtCoderClient
from atcoder_client.config import get_config
from atcoder_client.scrapers import (
    Contest, ContestListResponse, HtmlParseError, Problem, ProblemListResponse,
    ScrapeError, Submission, SubmissionListResponse, SubmissionStatus,
    TransportError, ValueParseError,
)

__version__ = '0.1.0'


def create_client(config_name=None):
    """Build a configured AtCoderClient.

    Args:
        config_name: Configuration name ('development', 'production' or
                     'testing'). Defaults to the ATCODER_ENV environment
                     variable or 'development'.
    """
    config = get_config(config_name)
    configure_logging(config)
    return AtCoderClient(config=config)


def configure_logging(config):
    """Attach a console handler and, if LOG_FILE is set, a RotatingFileHandler."""
    root = logging.getLogger()
    level = getattr(logging, config.LOG_LEVEL, logging.INFO)
    formatter = logging.Formatter(config.LOG_FORMAT)

    if not any(getattr(h, '_atcoder_client', False) for h in root.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        console._atcoder_client = True
        root.addHandler(console)

        if config.LOG_FILE:
            log_dir = os.path.dirname(os.path.abspath(config.LOG_FILE))
            os.makedirs(log_dir, exist_ok=True)
            handler = RotatingFileHandler(
                config.LOG_FILE,
                maxBytes=config.LOG_FILE_MAX_BYTES,
                backupCount=config.LOG_FILE_BACKUP_COUNT,
            )
            handler.setFormatter(formatter)
            handler.setLevel(logging.DEBUG)
            handler._atcoder_client = True
            root.addHandler(handler)

    root.setLevel(level)


__all__ = [
    'AtCoderClient', 'create_client', 'configure_logging', 'get_config',
    'Contest', 'ContestListResponse', 'Problem', 'ProblemListResponse',
    'Submission', 'SubmissionListResponse', 'SubmissionStatus',
    'ScrapeError', 'TransportError', 'HtmlParseError', 'ValueParseError',
]
