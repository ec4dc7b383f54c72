"""
Per-locale run outcomes
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .entry import TranslatedSet


class LocaleStatus(str, Enum):
    """Outcome of one locale's pipeline"""
    UP_TO_DATE = 'up_to_date'
    DRY_RUN = 'dry_run'
    UPDATED = 'updated'
    FAILED = 'failed'


@dataclass
class TranslationResult:
    """Parsed translator output; may hold fewer entries than were requested"""
    translations: TranslatedSet = field(default_factory=dict)
    malformed_lines: int = 0


@dataclass
class LocaleReport:
    """Summary of what happened to one locale"""
    locale: str
    status: LocaleStatus
    missing: int = 0
    written: int = 0
    malformed: int = 0
    files_written: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status == LocaleStatus.FAILED

    def to_dict(self) -> Dict[str, Any]:
        return {
            'locale': self.locale,
            'status': self.status.value,
            'missing': self.missing,
            'written': self.written,
            'malformed': self.malformed,
            'files_written': list(self.files_written),
            'error': self.error
        }
