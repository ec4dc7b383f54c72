"""
Shared helpers for building locale trees in tests
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from locale_sync.models.entry import MissingEntries
from locale_sync.models.report import TranslationResult


def write_locale_file(root: Path, locale: str, relative_path: str, data: Dict[str, Any]) -> Path:
    """Write root/locale/relative_path as JSON"""
    path = root / locale / relative_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding='utf-8')
    return path


def read_locale_file(root: Path, locale: str, relative_path: str) -> Dict[str, Any]:
    return json.loads((root / locale / relative_path).read_text(encoding='utf-8'))


def snapshot_tree(root: Path) -> Dict[str, bytes]:
    """Map every file under root to its content"""
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob('*')) if p.is_file()
    }


class StubTranslator:
    """Deterministic translator: prefixes every text with the target locale"""

    def __init__(
        self,
        keep: Optional[Callable[[Any], bool]] = None,
        malformed_lines: int = 0,
        fail_for: Tuple[str, ...] = ()
    ):
        self.keep = keep or (lambda key: True)
        self.malformed_lines = malformed_lines
        self.fail_for = fail_for
        self.calls: List[Tuple[MissingEntries, str]] = []

    async def translate(self, entries: MissingEntries, target_locale: str) -> TranslationResult:
        self.calls.append((dict(entries), target_locale))
        if target_locale in self.fail_for:
            raise RuntimeError(f"translation backend unavailable for {target_locale}")
        return TranslationResult(
            translations={
                key: f"[{target_locale}] {value}"
                for key, value in entries.items() if self.keep(key)
            },
            malformed_lines=self.malformed_lines
        )
