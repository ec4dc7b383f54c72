"""
Utility modules for locale-sync
"""

from .flatten import flatten, unflatten, set_nested
from .file_utils import read_json, read_json_or_empty, write_json, list_json_files
from .retry import retry_async

__all__ = ['flatten', 'unflatten', 'set_nested', 'read_json', 'read_json_or_empty', 'write_json', 'list_json_files', 'retry_async']
