"""
Async JSON file helpers for locale trees
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Union

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


async def read_json(file_path: PathLike) -> Dict[str, Any]:
    """Read a JSON document from disk"""
    async with aiofiles.open(file_path, 'r', encoding='utf-8') as f:
        content = await f.read()
    return json.loads(content)


async def read_json_or_empty(file_path: PathLike) -> Dict[str, Any]:
    """Read a JSON document, treating a missing file as an empty object"""
    if not await aiofiles.os.path.exists(file_path):
        return {}
    return await read_json(file_path)


async def write_json(file_path: PathLike, data: Dict[str, Any]) -> None:
    """Write a JSON document, creating parent directories as needed"""
    await aiofiles.os.makedirs(os.path.dirname(os.path.abspath(file_path)), exist_ok=True)
    content = json.dumps(data, ensure_ascii=False, indent=2) + '\n'
    async with aiofiles.open(file_path, 'w', encoding='utf-8') as f:
        await f.write(content)
    logger.debug(f"Wrote locale file: {file_path}")


def list_json_files(directory: PathLike) -> List[Path]:
    """List every .json file under directory, recursively and sorted"""
    return sorted(p for p in Path(directory).rglob('*.json') if p.is_file())
