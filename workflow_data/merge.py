"""Deep merge of documents, used by the raw JSON set mode.

Merge rules, per key of the source:
- dict into dict: merged recursively
- list into list: source items appended to the target list
- anything else: source value replaces the target value
"""

import copy
import json
from typing import Any, Dict

from .errors import InvalidRawJSONError


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``source`` into ``target`` in place.

    Values taken from ``source`` are copied, so later edits to the
    target never reach back into the source.

    Returns:
        The same ``target``, mutated

    Example:
        >>> deep_merge({"a": [1], "b": {"c": 1}}, {"a": [2], "b": {"d": 2}})
        {'a': [1, 2], 'b': {'c': 1, 'd': 2}}
    """
    if not isinstance(target, dict) or not isinstance(source, dict):
        raise TypeError(
            f"Cannot merge {type(source).__name__} into {type(target).__name__}"
        )

    for key, value in source.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            deep_merge(current, value)
        elif isinstance(current, list) and isinstance(value, list):
            current.extend(copy.deepcopy(value))
        else:
            target[key] = copy.deepcopy(value)

    return target


def parse_raw_json(raw: Any) -> Dict[str, Any]:
    """Turn raw JSON input into a mapping to merge.

    Strings are parsed as JSON. Anything else is used as-is. The result
    must be an object.

    Raises:
        InvalidRawJSONError: If the text is not JSON or not an object
    """
    data = raw
    if isinstance(raw, (str, bytes, bytearray)):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise InvalidRawJSONError(raw, str(e)) from e

    if not isinstance(data, dict):
        raise InvalidRawJSONError(
            raw, f"expected a JSON object, got {type(data).__name__}"
        )
    return data


def merge_raw_json(document: Dict[str, Any], raw: Any) -> Dict[str, Any]:
    """Parse ``raw`` and merge it into ``document``.

    Nothing is merged if parsing fails.
    """
    return deep_merge(document, parse_raw_json(raw))
