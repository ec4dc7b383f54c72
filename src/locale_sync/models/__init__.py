"""
Data models for locale-sync
"""

from .entry import (
    MissingEntryKey, MissingEntries, MissingTranslationSet, TranslatedSet,
    is_locale_tag, encode_entries, KEY_SEPARATOR
)
from .report import LocaleReport, LocaleStatus, TranslationResult

__all__ = [
    'MissingEntryKey', 'MissingEntries', 'MissingTranslationSet', 'TranslatedSet',
    'is_locale_tag', 'encode_entries', 'KEY_SEPARATOR',
    'LocaleReport', 'LocaleStatus', 'TranslationResult'
]
