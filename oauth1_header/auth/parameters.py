"""
Parameter normalization for the signature base string.
"""
from typing import Any, Dict, List, Mapping, Optional, Union

from .encoding import encode, sort_keys


def _is_multi_value(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def encode_parameters(
    oauth_data: Mapping[str, str],
    query: Optional[Mapping[str, Any]] = None,
    body: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Build the encoded, normalized parameter string of the base string.

    OAuth parameters, query parameters and (only when ``oauth_body_hash`` is
    present) body parameters are merged, each key and value is encoded, the
    pairs are sorted by encoded key and joined as ``key=value`` with ``&``.
    List values produce one pair per element, sorted by encoded value.
    The joined string is then encoded once more so that ``=`` and ``&``
    appear escaped in the base string.

    Args:
        oauth_data: oauth_* parameters (without oauth_signature)
        query: Query parameters
        body: Form body parameters

    Returns:
        Encoded parameter string
    """
    params: Dict[str, Any] = dict(oauth_data)
    params.update(query or {})
    if oauth_data.get('oauth_body_hash'):
        params.update(body or {})

    encoded_params: Dict[str, Union[str, List[str]]] = {}
    for key, value in params.items():
        if _is_multi_value(value):
            encoded_params[encode(key)] = [encode(item) for item in value]
        else:
            encoded_params[encode(key)] = encode(value)

    pairs = []
    for key, value in sort_keys(encoded_params):
        if _is_multi_value(value):
            pairs.extend(f"{key}={item}" for item in sorted(value))
        else:
            pairs.append(f"{key}={value}")

    return encode('&'.join(pairs))
