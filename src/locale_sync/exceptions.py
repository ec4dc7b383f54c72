"""
Error hierarchy for locale-sync
"""

from typing import Optional


class LocaleSyncError(Exception):
    """Base exception for all locale-sync errors"""

    def __init__(self, message: str, locale: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.locale = locale


class LocaleDirectoryNotFoundError(LocaleSyncError):
    """Locale root or reference locale directory does not exist"""

    def __init__(self, path: str, locale: Optional[str] = None):
        super().__init__(f"Locale directory not found: {path}", locale=locale)
        self.path = path


class TranslationServiceError(LocaleSyncError):
    """The translation backend could not be reached or refused the request"""


class ConfigurationError(LocaleSyncError):
    """Invalid or incomplete configuration"""
