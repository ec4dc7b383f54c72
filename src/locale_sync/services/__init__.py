"""
Services for locale-sync
"""

from .locale_discovery import discover_locales
from .missing_keys import missing_for_locale, missing_for_all_locales
from .translation_service import TranslationService, Translator, parse_translation_response
from .reporter import ConsoleReporter
from .orchestrator import TranslationOrchestrator, LocaleFileWriter, translate_missing_keys

__all__ = [
    'discover_locales', 'missing_for_locale', 'missing_for_all_locales',
    'TranslationService', 'Translator', 'parse_translation_response',
    'ConsoleReporter', 'TranslationOrchestrator', 'LocaleFileWriter', 'translate_missing_keys'
]
