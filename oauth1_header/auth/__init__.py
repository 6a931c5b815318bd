"""
OAuth 1.0a signing components.
"""
from .encoding import encode, sort_keys
from .parameters import encode_parameters
from .signature import (
    hmac_hash,
    generate_signing_key,
    generate_base_string,
    generate_signature,
)
from .nonce import generate_nonce
from .header import generate_header
from .models import SignedAuthorization
from .authorization import generate_authorization, authorize
from .request_signer import RequestSigner

__all__ = [
    'encode',
    'sort_keys',
    'encode_parameters',
    'hmac_hash',
    'generate_signing_key',
    'generate_base_string',
    'generate_signature',
    'generate_nonce',
    'generate_header',
    'SignedAuthorization',
    'generate_authorization',
    'authorize',
    'RequestSigner',
]
