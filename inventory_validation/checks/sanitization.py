"""
Input Sanitization

Neutralizes characters in untrusted text that a downstream renderer could
interpret as markup or script.

This is a denylist measure. It does not replace output encoding at render
time, and escaping is not idempotent for text that already contains
entities ("&lt;" becomes "&amp;lt;").
"""

import re
from typing import Any

from ..models.input_kind import InputKind, classify_input

HTML_ESCAPES = {
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#x27;',
    '&': '&amp;',
}

_ESCAPE_PATTERN = re.compile(r'[<>"\'&]')
_JAVASCRIPT_URL_PATTERN = re.compile(r'javascript:', re.IGNORECASE | re.ASCII)
_EVENT_HANDLER_PATTERN = re.compile(r'on\w+=', re.IGNORECASE | re.ASCII)


def _strip_script_vectors(text: str) -> str:
    """Remove javascript: URLs and event handlers until none remain."""
    while True:
        stripped = _JAVASCRIPT_URL_PATTERN.sub('', text)
        stripped = _EVENT_HANDLER_PATTERN.sub('', stripped)
        if stripped == text:
            return stripped
        text = stripped


def sanitize_input(value: Any) -> Any:
    """
    Sanitize a single user-supplied value.

    Non-string values are returned unchanged. Strings are trimmed, have
    ``< > " ' &`` escaped to HTML entities, and have ``javascript:`` URLs
    and ``on...=`` event handler attributes removed (case-insensitive).

    Examples:
        >>> sanitize_input('  <b>Gloves</b> ')
        '&lt;b&gt;Gloves&lt;/b&gt;'
        >>> sanitize_input('JAVASCRIPT:alert(1)')
        'alert(1)'
        >>> sanitize_input(42)
        42
    """
    if not isinstance(value, str):
        return value

    escaped = _ESCAPE_PATTERN.sub(lambda match: HTML_ESCAPES[match.group(0)], value.strip())
    return _strip_script_vectors(escaped)


def sanitize_object_data(data: Any) -> Any:
    """
    Recursively sanitize every string inside a nested structure.

    - None passes through
    - strings are sanitized
    - lists and tuples are sanitized element-wise (same type, order, length)
    - dicts are sanitized value-wise (keys preserved)
    - anything else (numbers, booleans, dates) passes through

    The input is never mutated; containers are rebuilt.
    """
    kind = classify_input(data)

    if kind == InputKind.ABSENT or kind == InputKind.STRING:
        return sanitize_input(data)

    if kind == InputKind.SEQUENCE:
        items = [sanitize_object_data(item) for item in data]
        return tuple(items) if isinstance(data, tuple) else items

    if kind == InputKind.MAPPING:
        return {key: sanitize_object_data(item) for key, item in data.items()}

    return data
