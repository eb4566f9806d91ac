"""Command-line entry point.

Usage:
    secretrecon [FILE ...] [--verify] [--strict] [--log-level LEVEL]
"""

import argparse
import logging

from secretrecon.config import DEFAULT_LOG_LEVEL, FILES_ENV, RunConfig
from secretrecon.runner import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='secretrecon',
        description='Reconstruct Shamir secrets from JSON share files.',
    )
    parser.add_argument(
        'files', nargs='*',
        help=f'share files (default: ${FILES_ENV} or testcase1.json testcase2.json)')
    parser.add_argument(
        '--verify', action='store_true',
        help='check that shares beyond k agree with the reconstructed polynomial')
    parser.add_argument(
        '--strict', action='store_true',
        help='exit with status 1 if any file fails')
    parser.add_argument(
        '--log-level', default=DEFAULT_LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='logging verbosity (diagnostics go to stderr)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = RunConfig.from_args(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format='%(levelname)s %(name)s: %(message)s',
    )

    results = run(config.files, verify=config.verify)
    failed = [r for r in results if not r.ok]
    logger.info("%d of %d files reconstructed", len(results) - len(failed), len(results))

    if config.strict and failed:
        return 1
    return 0
