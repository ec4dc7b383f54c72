"""
Flatten nested locale documents into dotted paths and back
"""

from typing import Dict, Any


def flatten(doc: Dict[str, Any], prefix: str = '') -> Dict[str, Any]:
    """
    Flatten a nested JSON object into a mapping of dotted path -> leaf value.

    Only non-empty objects are recursed into; empty objects, lists, None and
    scalars are leaves, so unflatten(flatten(doc)) == doc.
    Keys that themselves contain a dot produce ambiguous paths.
    """
    result: Dict[str, Any] = {}
    for key, value in doc.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict) and value:
            result.update(flatten(value, path))
        else:
            result[path] = value
    return result


def set_nested(doc: Dict[str, Any], dotted_key: str, value: Any) -> None:
    """Assign value at dotted_key, creating intermediate objects as needed"""
    parts = dotted_key.split('.')
    current = doc
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def unflatten(flat: Dict[str, Any]) -> Dict[str, Any]:
    """Rebuild a nested JSON object from a dotted-path mapping"""
    result: Dict[str, Any] = {}
    for dotted_key, value in flat.items():
        set_nested(result, dotted_key, value)
    return result
