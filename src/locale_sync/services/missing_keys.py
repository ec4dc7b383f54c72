"""
Detection of keys present in the reference locale but absent elsewhere
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..models.entry import MissingEntryKey, MissingEntries, MissingTranslationSet
from ..utils.file_utils import list_json_files, read_json, read_json_or_empty
from ..utils.flatten import flatten
from .locale_discovery import discover_locales, ensure_directory

logger = logging.getLogger(__name__)


async def _missing_for_file(
    reference_dir: Path,
    locale_dir: Path,
    reference_file: Path
) -> List[Tuple[MissingEntryKey, Any]]:
    relative_path = reference_file.relative_to(reference_dir).as_posix()
    reference_doc, target_doc = await asyncio.gather(
        read_json(reference_file),
        read_json_or_empty(locale_dir / relative_path)
    )
    reference_flat = flatten(reference_doc)
    target_keys = set(flatten(target_doc))

    missing = []
    for json_path, value in reference_flat.items():
        if json_path in target_keys:
            continue
        # An empty reference object is satisfied by any content under the same path
        if value == {} and any(k.startswith(json_path + '.') for k in target_keys):
            continue
        key = MissingEntryKey(relative_path, json_path)
        if key.is_ambiguous:
            logger.warning(f"Key '{key}' contains the ':::' separator and may not be written back correctly")
        missing.append((key, value))
    return missing


async def missing_for_locale(reference_dir: os.PathLike, locale_dir: os.PathLike) -> MissingEntries:
    """
    Compute the reference entries that locale_dir lacks

    Every .json file under reference_dir is compared with the file at the same
    relative path under locale_dir; a target file that does not exist counts as
    an empty document. Entries keep the reference files' key order.
    """
    reference_dir = ensure_directory(reference_dir)
    locale_dir = Path(locale_dir)

    files = list_json_files(reference_dir)
    groups = await asyncio.gather(*(
        _missing_for_file(reference_dir, locale_dir, reference_file)
        for reference_file in files
    ))

    return {key: value for group in groups for key, value in group}


async def missing_for_all_locales(
    root_dir: os.PathLike,
    reference_locale: str,
    errors: Optional[Dict[str, BaseException]] = None
) -> MissingTranslationSet:
    """
    Compute missing entries for every locale under root_dir except the reference

    Locales are processed concurrently. When an ``errors`` dict is given, a
    locale whose detection fails is recorded there and left out of the result;
    otherwise the first failure propagates.
    """
    root = ensure_directory(root_dir)
    reference_dir = ensure_directory(root / reference_locale, locale=reference_locale)

    locales = sorted(locale for locale in discover_locales(root) if locale != reference_locale)
    results = await asyncio.gather(
        *(missing_for_locale(reference_dir, root / locale) for locale in locales),
        return_exceptions=errors is not None
    )

    missing: MissingTranslationSet = {}
    for locale, result in zip(locales, results):
        if isinstance(result, BaseException):
            logger.error(f"Failed to detect missing keys for {locale}: {result}")
            errors[locale] = result
            continue
        logger.debug(f"{locale}: {len(result)} missing keys")
        missing[locale] = result
    return missing
