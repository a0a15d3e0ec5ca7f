"""
Argument encoding for query strings and form bodies.

Arguments with an empty-string or None value are dropped entirely (never
sent as 'key='). Every other value is converted with str() and
percent-encoded with no safe characters, so a space becomes %20.
Keys are sent as given.
"""

from typing import Any, Mapping
from urllib.parse import quote


def build_argument_string(arguments: Mapping[str, Any] | None) -> str:
    """
    Encode arguments as a query string suffix.

    Args:
        arguments: Ordered key/value mapping. None is treated as empty.

    Returns:
        '?k1=v1&k2=v2' in mapping order, or '' if nothing is left to send.

    Example:
        build_argument_string({"a": "", "b": "x y"})
        # '?b=x%20y'
    """
    if not arguments:
        return ""

    pairs = [
        f"{key}={quote(str(value), safe='')}"
        for key, value in arguments.items()
        if value is not None and value != ""
    ]
    if not pairs:
        return ""
    return "?" + "&".join(pairs)


def build_form_payload(arguments: Mapping[str, Any] | None) -> str:
    """
    Encode arguments as an application/x-www-form-urlencoded body.

    Same rules as build_argument_string() without the leading '?'.
    """
    return build_argument_string(arguments)[1:]
