from __future__ import annotations
import json
from typing import Any, Iterator, Mapping


def encode_json(data: Mapping[str, Any]) -> str:
    """Serialize a flat outbound mapping into compact JSON text.

        str, int, bool and None are written natively; anything else is
        written as the quoted text of str(value).
        """

    normalized = {str(key): _normalize_value(value) for key, value in data.items()}
    return json.dumps(normalized, ensure_ascii=False, separators=(",", ":"))

def _normalize_value(value: Any) -> Any:
    if value is None or isinstance(value, (str, bool, int)):
        return value
    return str(value)

_UNPARSED = object()

def _parse(text: str | None) -> Any:
    if not text:
        return _UNPARSED

    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        # pathologically nested bodies count as unparsable
        return _UNPARSED

def _parse_object(text: str | None) -> dict[str, Any] | None:
    data = _parse(text)
    if not isinstance(data, dict):
        return None
    return data

def extract_field(text: str | None, name: str) -> str | None:
    """Return a top-level field of a JSON object as text, or None.

        A missing key, a null value, a non-object root and unparsable text
        all give None.
        """

    data = _parse_object(text)
    if data is None:
        return None

    value = data.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # nested objects and arrays are not scalar fields
    return None

def has_true_field(text: str | None, name: str) -> bool:
    data = _parse_object(text)
    return data is not None and data.get(name) is True

def _find_key(data: Any, name: str) -> Iterator[Any]:
    """Yield the value of every object member called name, at any depth."""

    stack = [data]
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            if name in node:
                yield node[name]
            stack.extend(node.values())
        elif isinstance(node, list):
            stack.extend(node)

def has_success_marker(text: str | None) -> bool:
    """True if any object in the response carries ``"success": true``."""

    return any(value is True for value in _find_key(_parse(text), "success"))

def has_error_marker(text: str | None) -> bool:
    """True if any object in the response has an ``error`` member."""

    return any(True for _ in _find_key(_parse(text), "error"))
