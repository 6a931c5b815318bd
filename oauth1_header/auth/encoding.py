"""
RFC 3986 percent-encoding and key ordering helpers.
"""
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import quote


def encode(value: Optional[Any]) -> str:
    """
    Percent-encode a value per RFC 3986 (https://datatracker.ietf.org/doc/html/rfc3986).

    Only the unreserved characters A-Z, a-z, 0-9, "-", "_", "." and "~" are
    left as-is. Unlike JavaScript's encodeURIComponent, "!", "'", "(", ")"
    and "*" are escaped too.

    Args:
        value: Value to encode. None and other falsy values encode to "".

    Returns:
        Encoded string with uppercase hex escapes
    """
    if not value:
        return ''
    return quote(str(value), safe='~')


def sort_keys(mapping: Mapping[str, Any]) -> List[Tuple[str, Any]]:
    """
    Return the (key, value) pairs of a mapping in ascending key order.

    Args:
        mapping: Mapping to order (not modified)

    Returns:
        List of (key, value) tuples
    """
    return [(key, mapping[key]) for key in sorted(mapping)]
