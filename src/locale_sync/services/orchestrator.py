"""
Translation of missing keys across all locales of a locale tree
"""

import asyncio
import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..config.load_config import get_settings
from ..config.settings import Settings
from ..models.entry import MissingEntries, TranslatedSet, encode_entries
from ..models.report import LocaleReport, LocaleStatus, TranslationResult
from ..utils.file_utils import read_json_or_empty, write_json
from ..utils.flatten import set_nested
from .missing_keys import missing_for_all_locales
from .reporter import ConsoleReporter
from .translation_service import TranslationService, Translator

logger = logging.getLogger(__name__)


class LocaleFileWriter:
    """Merges translated leaves into locale files, one writer per file at a time"""

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock_for(self, file_path: Path) -> asyncio.Lock:
        key = os.path.abspath(file_path)
        if key not in self._locks:
            self._locks[key] = asyncio.Lock()
        return self._locks[key]

    async def merge(self, file_path: Path, updates: Dict[str, Any]) -> None:
        """Read file_path (or start empty), set every dotted path in updates, write it back"""
        async with self._lock_for(file_path):
            doc = await read_json_or_empty(file_path)
            for dotted_key, value in updates.items():
                set_nested(doc, dotted_key, value)
            await write_json(file_path, doc)


class TranslationOrchestrator:
    """Detects missing keys, translates them and merges the results into locale files"""

    def __init__(
        self,
        translator: Translator,
        reporter: Optional[ConsoleReporter] = None,
        writer: Optional[LocaleFileWriter] = None
    ):
        self.translator = translator
        self.reporter = reporter or ConsoleReporter()
        self.writer = writer or LocaleFileWriter()

    async def _write_translations(self, locale_dir: Path, translations: TranslatedSet) -> Tuple[int, List[str]]:
        by_file: Dict[str, Dict[str, Any]] = defaultdict(dict)
        for key, value in translations.items():
            by_file[key.relative_path][key.json_path] = value

        files = sorted(by_file)
        await asyncio.gather(*(
            self.writer.merge(locale_dir / relative_path, by_file[relative_path])
            for relative_path in files
        ))
        return sum(len(updates) for updates in by_file.values()), files

    async def _process_locale(
        self,
        root: Path,
        locale: str,
        entries: MissingEntries,
        dry_run: bool
    ) -> LocaleReport:
        total = len(entries)
        if total == 0:
            self.reporter.up_to_date(locale)
            return LocaleReport(locale, LocaleStatus.UP_TO_DATE)

        if dry_run:
            self.reporter.dry_run(locale, encode_entries(entries))
            return LocaleReport(locale, LocaleStatus.DRY_RUN, missing=total)

        # Numbers, booleans, null, lists and empty objects are copied unchanged
        texts = {key: value for key, value in entries.items() if isinstance(value, str)}
        translations = {key: value for key, value in entries.items() if key not in texts}

        self.reporter.in_progress(locale, total)
        result = TranslationResult()
        if texts:
            result = await self.translator.translate(texts, locale)
        if result.malformed_lines:
            self.reporter.malformed(locale, result.malformed_lines)

        # Only keys that were asked for may be written
        translations.update(
            (key, value) for key, value in result.translations.items() if key in texts
        )
        written, files = await self._write_translations(root / locale, translations)

        report = LocaleReport(
            locale,
            LocaleStatus.UPDATED,
            missing=total,
            written=written,
            malformed=result.malformed_lines,
            files_written=files
        )
        self.reporter.updated(report)
        return report

    def _failed(self, locale: str, error: BaseException) -> LocaleReport:
        self.reporter.failed(locale, error)
        return LocaleReport(locale, LocaleStatus.FAILED, error=str(error))

    async def translate_missing_keys(
        self,
        root_dir: os.PathLike,
        reference_locale: str,
        dry_run: bool = False
    ) -> List[LocaleReport]:
        """
        Fill every locale under root_dir with the keys it lacks from reference_locale

        A missing root or reference directory aborts the run. Any other failure
        only affects its own locale and ends up as a FAILED report.
        """
        root = Path(root_dir)
        errors: Dict[str, BaseException] = {}
        all_missing = await missing_for_all_locales(root, reference_locale, errors=errors)

        locales = sorted(all_missing)
        results = await asyncio.gather(
            *(self._process_locale(root, locale, all_missing[locale], dry_run) for locale in locales),
            return_exceptions=True
        )

        reports = [self._failed(locale, error) for locale, error in sorted(errors.items())]
        for locale, result in zip(locales, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                logger.debug(f"{locale} pipeline failed", exc_info=result)
                reports.append(self._failed(locale, result))
            else:
                reports.append(result)

        return sorted(reports, key=lambda r: r.locale)


async def translate_missing_keys(
    root_dir: os.PathLike,
    reference_locale: str,
    dry_run: bool = False,
    settings: Optional[Settings] = None,
    reporter: Optional[ConsoleReporter] = None
) -> List[LocaleReport]:
    """Run the orchestrator with the OpenAI translation service"""
    settings = settings or get_settings()

    orchestrator = TranslationOrchestrator(TranslationService(settings.translator), reporter=reporter)
    return await orchestrator.translate_missing_keys(root_dir, reference_locale, dry_run=dry_run)
