"""
Signature base string construction and HMAC signing.

Base string: {METHOD}&{encoded base URL}&{encoded parameter string}
Signing key: {encoded consumer secret}&{encoded token secret}
"""
import base64
import hashlib
import hmac
import logging
from typing import Mapping, Optional, Union

from ..models.options import SignatureMethod
from ..models.request import OAuthRequest
from .encoding import encode
from .parameters import encode_parameters

logger = logging.getLogger(__name__)

_DIGESTS = {
    SignatureMethod.HMAC_SHA1: hashlib.sha1,
    SignatureMethod.HMAC_SHA256: hashlib.sha256,
}


def hmac_hash(
    value: str,
    signing_key: str,
    signature_method: Union[str, SignatureMethod] = SignatureMethod.HMAC_SHA1
) -> str:
    """
    Compute a base64-encoded HMAC digest.

    Args:
        value: Message to sign (the signature base string)
        signing_key: HMAC key
        signature_method: HMAC-SHA1 or HMAC-SHA256

    Returns:
        Base64-encoded digest

    Raises:
        UnsupportedSignatureMethodError: If the method is not an HMAC method
    """
    method = SignatureMethod.from_string(signature_method)
    digest = hmac.new(
        signing_key.encode('utf-8'),
        value.encode('utf-8'),
        _DIGESTS[method]
    ).digest()
    return base64.b64encode(digest).decode('utf-8')


def generate_signing_key(consumer_secret: Optional[str], token_secret: Optional[str] = None) -> str:
    """Build the signing key; the trailing & is kept when there is no token secret."""
    return f"{encode(consumer_secret)}&{encode(token_secret)}"


def generate_base_string(request: OAuthRequest, oauth_data: Mapping[str, str]) -> str:
    """
    Build the signature base string of a request.

    The method is used verbatim. The URL is cut at the first "?" and encoded.

    Args:
        request: Request being signed
        oauth_data: oauth_* parameters, without oauth_signature

    Returns:
        Signature base string
    """
    encoded_url = encode(request.base_url)
    encoded_params = encode_parameters(oauth_data, request.query, request.body)
    return f"{request.method.value}&{encoded_url}&{encoded_params}"


def generate_signature(
    request: OAuthRequest,
    oauth_data: Mapping[str, str],
    consumer_secret: Optional[str],
    token_secret: Optional[str] = None,
    encode_signature: bool = False,
    signature_method: Union[str, SignatureMethod] = SignatureMethod.HMAC_SHA1
) -> str:
    """
    Sign a request.

    Args:
        request: Request being signed
        oauth_data: oauth_* parameters, without oauth_signature
        consumer_secret: Consumer secret
        token_secret: Token secret, if a token is used
        encode_signature: Percent-encode the base64 signature. Do not combine
            with header rendering, which encodes values again.
        signature_method: HMAC-SHA1 (default) or HMAC-SHA256

    Returns:
        Base64 signature, percent-encoded if encode_signature is set
    """
    method = SignatureMethod.from_string(signature_method)
    base_string = generate_base_string(request, oauth_data)

    logger.debug("Signature base string built", extra={
        'signature_method': method.value,
        'base_string': base_string
    })

    signing_key = generate_signing_key(consumer_secret, token_secret)
    signature = hmac_hash(base_string, signing_key, method)

    if encode_signature:
        return encode(signature)
    return signature
