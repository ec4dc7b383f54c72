"""
Locale tags and missing-entry keys
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

# language[-script][-region]: 2-4 letters, optional 4-letter script,
# optional 2-letter or 3-digit region; '-' or '_' separated
LOCALE_TAG_PATTERN = re.compile(r'^[A-Za-z]{2,4}([_-][A-Za-z]{4})?([_-]([A-Za-z]{2}|[0-9]{3}))?$')

KEY_SEPARATOR = ':::'


def is_locale_tag(name: str) -> bool:
    """Check whether a directory name looks like a locale tag"""
    return LOCALE_TAG_PATTERN.match(name) is not None


@dataclass(frozen=True)
class MissingEntryKey:
    """Address of one leaf: a file relative to the locale root and a dotted JSON path"""
    relative_path: str
    json_path: str

    def __post_init__(self):
        # Keys are compared across platforms, so always use forward slashes
        object.__setattr__(self, 'relative_path', self.relative_path.replace('\\', '/'))

    @property
    def is_ambiguous(self) -> bool:
        """True when the serialized form cannot be split back unambiguously"""
        return KEY_SEPARATOR in self.relative_path or KEY_SEPARATOR in self.json_path

    def encode(self) -> str:
        return f"{self.relative_path}{KEY_SEPARATOR}{self.json_path}"

    @classmethod
    def decode(cls, encoded: str) -> Optional['MissingEntryKey']:
        """Split 'relative/path.json:::json.path'; None if it is not a valid key"""
        relative_path, sep, json_path = encoded.strip().partition(KEY_SEPARATOR)
        relative_path = relative_path.strip()
        json_path = json_path.strip()
        if not sep or not relative_path or not json_path:
            return None
        return cls(relative_path, json_path)

    def __str__(self) -> str:
        return self.encode()


# locale tag -> missing entry -> reference value (text, or any other JSON leaf)
MissingEntries = Dict[MissingEntryKey, Any]
MissingTranslationSet = Dict[str, MissingEntries]
TranslatedSet = Dict[MissingEntryKey, Any]


def encode_entries(entries: MissingEntries) -> Dict[str, Any]:
    """Serialize entry keys to their delimited form, e.g. for previews"""
    return {key.encode(): value for key, value in entries.items()}
