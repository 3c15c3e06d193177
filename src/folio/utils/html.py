"""HTML escaping for data-supplied text."""

from html import escape
from typing import Any


def escape_html(value: Any) -> str:
    """Escape text for safe insertion into markup or attribute values.

    Converts ``<``, ``>``, ``&`` and both quote characters. ``None`` becomes
    an empty string and other values are converted with ``str()`` first.
    """
    if value is None:
        return ""
    return escape(str(value), quote=True)
