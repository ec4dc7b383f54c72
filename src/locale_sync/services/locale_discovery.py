"""
Locale directory discovery
"""

import logging
import os
from pathlib import Path
from typing import Set

from ..exceptions import LocaleDirectoryNotFoundError
from ..models.entry import is_locale_tag

logger = logging.getLogger(__name__)


def ensure_directory(path: os.PathLike, locale: str = None) -> Path:
    """Return path as a Path, raising NotFound if it is not an existing directory"""
    directory = Path(path)
    if not directory.is_dir():
        raise LocaleDirectoryNotFoundError(str(directory), locale=locale)
    return directory


def discover_locales(root_dir: os.PathLike) -> Set[str]:
    """
    List locale directories directly under root_dir

    Only subdirectories whose name matches the locale tag grammar are kept,
    so 'fr', 'pt-BR', 'zh_Hant_TW' and 'es-419' qualify while 'assets' or
    'xx-yy-zz' do not.
    """
    root = ensure_directory(root_dir)

    locales = set()
    for entry in root.iterdir():
        if not entry.is_dir():
            continue
        if is_locale_tag(entry.name):
            locales.add(entry.name)
        else:
            logger.debug(f"Skipping non-locale directory: {entry.name}")

    logger.info(f"Discovered {len(locales)} locales in {root}")
    return locales
