"""
Console reporting of per-locale progress
"""

import json
import logging
import sys
from typing import Dict, TextIO

from colorama import Fore, Style

from ..models.report import LocaleReport

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """Prints one colored status line per locale event"""

    def __init__(self, stream: TextIO = None, use_color: bool = True):
        self.stream = stream or sys.stdout
        self.use_color = use_color

    def _emit(self, message: str, color: str = '') -> None:
        if self.use_color and color:
            message = f"{color}{message}{Style.RESET_ALL}"
        print(message, file=self.stream, flush=True)

    def up_to_date(self, locale: str) -> None:
        logger.info(f"{locale}: nothing to translate")
        self._emit(f"✅ {locale}: nothing to translate.", Fore.LIGHTBLACK_EX)

    def dry_run(self, locale: str, entries: Dict[str, str]) -> None:
        logger.info(f"{locale}: dry run, {len(entries)} missing keys")
        self._emit(f"--- [DRY-RUN] Missing keys for {locale}", Fore.YELLOW)
        self._emit(json.dumps(entries, ensure_ascii=False, indent=2))

    def in_progress(self, locale: str, total: int) -> None:
        logger.info(f"{locale}: translating {total} keys")
        self._emit(f"🌍 Translating {total} keys for {locale}...", Fore.BLUE)

    def updated(self, report: LocaleReport) -> None:
        logger.info(f"{report.locale}: wrote {report.written}/{report.missing} translations")
        self._emit(
            f"✅ {report.locale} updated with {report.written} translations"
            f" ({len(report.files_written)} files).",
            Fore.GREEN
        )
        if report.written < report.missing:
            self._emit(
                f"⚠️  {report.locale}: {report.missing - report.written} keys left untranslated.",
                Fore.YELLOW
            )

    def malformed(self, locale: str, count: int) -> None:
        logger.warning(f"{locale}: skipped {count} malformed translation lines")
        self._emit(f"⚠️  {locale}: skipped {count} malformed lines in the translator response.", Fore.YELLOW)

    def failed(self, locale: str, error: BaseException) -> None:
        logger.error(f"{locale}: {error}")
        self._emit(f"❌ {locale}: {error}", Fore.RED)
