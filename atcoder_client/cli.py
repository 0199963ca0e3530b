"""Command-line front end for AtCoderClient.

Usage:
    atcoder-client contests [--page N]
    atcoder-client problems abc107
    atcoder-client submissions abc134 [--page N]
    atcoder-client code abc172 14924462

Records are printed as JSON on stdout.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys

from atcoder_client import configure_logging, get_config
from atcoder_client.client import AtCoderClient
from atcoder_client.scrapers.errors import ScrapeError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='atcoder-client',
        description='Scrape contests, problems and submissions from AtCoder.',
    )
    parser.add_argument('--env', default=None,
                        help='config name (development, production, testing)')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('contests', help='list contests on an archive page')
    p.add_argument('--page', type=int, default=1)

    p = sub.add_parser('problems', help='list the tasks of a contest')
    p.add_argument('contest_id')

    p = sub.add_parser('submissions', help='list one page of a contest\'s submissions')
    p.add_argument('contest_id')
    p.add_argument('--page', type=int, default=None)

    p = sub.add_parser('code', help='print the source code of a submission')
    p.add_argument('contest_id')
    p.add_argument('submission_id', type=int)
    return parser


def run(args, client: AtCoderClient) -> object:
    if args.command == 'contests':
        response = client.fetch_contest_list(args.page)
        return [c.to_dict() for c in response.contests]
    if args.command == 'problems':
        response = client.fetch_problem_list(args.contest_id)
        return [p.to_dict() for p in response.problems]
    if args.command == 'submissions':
        response = client.fetch_submission_list(args.contest_id, args.page)
        return {
            'max_page': response.max_page,
            'submissions': [s.to_dict() for s in response.submissions],
        }
    if args.command == 'code':
        return client.fetch_submission_code(args.contest_id, args.submission_id)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None, client: AtCoderClient = None) -> int:
    args = build_parser().parse_args(argv)
    config = get_config(args.env)
    configure_logging(config)
    client = client or AtCoderClient(config=config)

    try:
        result = run(args, client)
    except ScrapeError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    if isinstance(result, str):
        sys.stdout.write(result)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
