"""
OAuth 1.0a request signing.

Builds the signature base string of an HTTP request, signs it with
HMAC-SHA1 or HMAC-SHA256 and renders the Authorization header.
"""
from .models import (
    OAuthRequest,
    HttpMethod,
    Consumer,
    Token,
    OAuthOptions,
    HeaderOptions,
    SignatureMethod,
    UnsupportedSignatureMethodError,
)
from .auth import (
    authorize,
    generate_authorization,
    generate_header,
    generate_base_string,
    generate_signature,
    generate_signing_key,
    generate_nonce,
    encode,
    encode_parameters,
    hmac_hash,
    sort_keys,
    SignedAuthorization,
    RequestSigner,
)

__version__ = '0.1.0'

__all__ = [
    'OAuthRequest',
    'HttpMethod',
    'Consumer',
    'Token',
    'OAuthOptions',
    'HeaderOptions',
    'SignatureMethod',
    'UnsupportedSignatureMethodError',
    'authorize',
    'generate_authorization',
    'generate_header',
    'generate_base_string',
    'generate_signature',
    'generate_signing_key',
    'generate_nonce',
    'encode',
    'encode_parameters',
    'hmac_hash',
    'sort_keys',
    'SignedAuthorization',
    'RequestSigner',
]
