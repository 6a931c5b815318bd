"""
Authorization header rendering.

Format: OAuth [realm="...", ]oauth_key1="v1", oauth_key2="v2", ...
"""
from typing import Mapping, Optional

from ..models.options import DEFAULT_PARAMETER_SEPARATOR
from .encoding import encode, sort_keys

OAUTH_PARAMETER_PREFIX = 'oauth_'


def generate_header(oauth_data: Mapping[str, str], options: Optional[object] = None) -> str:
    """
    Render signed OAuth parameters as an Authorization header value.

    Only keys starting with "oauth_" are emitted, in ascending key order,
    with keys and values percent-encoded. The realm is emitted first and
    is not encoded.

    Args:
        oauth_data: Signed parameters
        options: HeaderOptions or OAuthOptions (realm, parameter_separator)

    Returns:
        Header value starting with "OAuth "
    """
    realm = getattr(options, 'realm', None)
    separator = getattr(options, 'parameter_separator', None)
    if separator is None:
        separator = DEFAULT_PARAMETER_SEPARATOR

    header = [f'realm="{realm}"'] if realm else []

    for key, value in sort_keys(oauth_data):
        if not key.startswith(OAUTH_PARAMETER_PREFIX):
            continue
        header.append(f'{encode(key)}="{encode(value)}"')

    return f"OAuth {separator.join(header)}"
