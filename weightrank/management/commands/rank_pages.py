"""Rank a directory of HTML pages with weighted PageRank.

Usage::

    python manage.py rank_pages -docs DIRECTORY -f F_VALUE [--debug]

Exit statuses: 0 on success, 1 when help was requested, 2 on invalid
arguments or an invalid config file, 3 when the directory cannot be
scanned, 4 when it holds no readable documents, 5 when the scores do not
converge and 6 for any other ranking failure.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Type

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError, CommandParser

from weightrank.engine.config import load_config
from weightrank.engine.errors import (
    ConfigError,
    ConvergenceError,
    EmptyCorpusError,
    RankingError,
    ScanError,
)
from weightrank.engine.index import rank_directory
from weightrank.engine.report import format_ranking
from weightrank.engine.solver import validate_follow

logger = logging.getLogger('weightrank.commands')

EXIT_HELP = 1
EXIT_USAGE = 2  # argparse's own status for a parse failure
EXIT_SCAN_FAILED = 3
EXIT_EMPTY_CORPUS = 4
EXIT_NOT_CONVERGED = 5
EXIT_RANKING_FAILED = 6

EXIT_STATUSES: Dict[Type[RankingError], int] = {
    ConfigError: EXIT_USAGE,
    ScanError: EXIT_SCAN_FAILED,
    EmptyCorpusError: EXIT_EMPTY_CORPUS,
    ConvergenceError: EXIT_NOT_CONVERGED,
}


def exit_status(error: RankingError) -> int:
    for error_class, status in EXIT_STATUSES.items():
        if isinstance(error, error_class):
            return status
    return EXIT_RANKING_FAILED


def follow_probability(value: str) -> float:
    """argparse type for ``-f``: a float strictly between 0 and 1."""

    try:
        return validate_follow(float(value))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f'{value!r} is not an integer') from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f'{value!r} must be at least 1')
    return number


class UsageAction(argparse.Action):
    """Print the usage text to stderr and exit with ``EXIT_HELP``."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS, help=None):
        super().__init__(option_strings=option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit(EXIT_HELP)


class Command(BaseCommand):
    help = 'Rank the HTML pages under a directory with weighted PageRank.'

    requires_system_checks: list[str] = []

    def create_parser(self, prog_name: str, subcommand: str, **kwargs: Any) -> CommandParser:
        parser = super().create_parser(prog_name, subcommand, add_help=False, **kwargs)
        parser.add_argument(
            '-h', '-help', '--help',
            action=UsageAction,
            help='Print this help text.',
        )
        return parser

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            '-d', '-docs', '--docs',
            dest='docs',
            required=True,
            type=Path,
            metavar='DIRECTORY',
            help='Path to the directory containing pages.',
        )
        parser.add_argument(
            '-f',
            dest='follow',
            required=True,
            type=follow_probability,
            metavar='F',
            help='The probability of following links in the PageRank model.',
        )
        parser.add_argument(
            '--debug',
            action='store_true',
            help='Log per-document and per-iteration diagnostics.',
        )
        parser.add_argument(
            '--config',
            default=None,
            help='YAML engine configuration; defaults to settings.WEIGHTRANK_CONFIG.',
        )
        parser.add_argument(
            '--max-iterations',
            dest='max_iterations',
            type=positive_int,
            default=None,
            help='Give up when scores have not converged after this many iterations.',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        if options['debug']:
            logging.getLogger('weightrank').setLevel(logging.DEBUG)

        if options['config'] and not Path(options['config']).is_file():
            raise CommandError(f"Config file {options['config']} does not exist.", returncode=EXIT_USAGE)
        config_path = options['config'] or getattr(settings, 'WEIGHTRANK_CONFIG', None)
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            logger.error('Invalid configuration: %s', exc)
            raise CommandError(str(exc), returncode=exit_status(exc)) from exc
        max_iterations = options['max_iterations'] or getattr(settings, 'WEIGHTRANK_MAX_ITERATIONS', None)

        try:
            result = rank_directory(
                options['docs'],
                options['follow'],
                config,
                max_iterations=max_iterations,
            )
        except RankingError as exc:
            logger.error('Ranking %s failed: %s', options['docs'], exc)
            raise CommandError(str(exc), returncode=exit_status(exc)) from exc

        logger.debug(
            'Ranked %d documents in %d iterations (f=%s, epsilon=%g)',
            len(result.documents),
            result.iterations,
            result.follow,
            result.epsilon,
        )
        for line in format_ranking(result.documents, config):
            self.stdout.write(line)
