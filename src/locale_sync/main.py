"""
Command line entry point
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from . import __version__
from .config import load_settings
from .exceptions import ConfigurationError, LocaleDirectoryNotFoundError
from .models.report import LocaleReport
from .services.orchestrator import translate_missing_keys
from .services.reporter import ConsoleReporter

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_LOCALE_FAILED = 1
EXIT_USAGE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='locale-sync',
        description="Translation tooling for JSON locale files"
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest='command', required=True)

    update = subparsers.add_parser(
        'update-translations',
        help="Fill missing translations in JSON locale files"
    )
    update.add_argument('folder', help="Path to the locales folder (one subfolder per locale)")
    update.add_argument('reference_locale', metavar='referenceLocale', help="Reference locale code (e.g. fr)")
    update.add_argument('--dry-run', action='store_true', help="Show missing keys without translating anything")
    update.add_argument('--model', help="Chat model used for translation (default: OPENAI_MODEL or gpt-4)")
    update.add_argument('--log-level', help="Logging level (default: LOG_LEVEL or WARNING)")
    update.add_argument(
        '--allow-failures',
        action='store_true',
        help="Exit with status 0 even if some locales failed"
    )
    return parser


def setup_logging(level: str) -> None:
    """Configure root logging to stderr"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


def exit_code_for(reports: List[LocaleReport], allow_failures: bool) -> int:
    """Non-zero when any locale failed, unless failures are allowed"""
    if not allow_failures and any(report.failed for report in reports):
        return EXIT_LOCALE_FAILED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    just_fix_windows_console()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    setup_logging(args.log_level or settings.run.log_level)
    if args.model:
        settings.translator.model = args.model

    try:
        reports = asyncio.run(translate_missing_keys(
            args.folder,
            args.reference_locale,
            dry_run=args.dry_run,
            settings=settings,
            reporter=ConsoleReporter(use_color=sys.stdout.isatty())
        ))
    except LocaleDirectoryNotFoundError as e:
        logger.error(str(e))
        print(f"❌ {e}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    logger.debug(f"Run summary: {json.dumps([report.to_dict() for report in reports], ensure_ascii=False)}")
    failed = [report.locale for report in reports if report.failed]
    if failed:
        logger.warning(f"Locales with errors: {', '.join(failed)}")
    return exit_code_for(reports, args.allow_failures or settings.run.allow_failures)


if __name__ == '__main__':
    sys.exit(main())
