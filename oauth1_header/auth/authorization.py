"""
Authorization assembly: default parameters, signing and header rendering.
"""
import logging
import math
import time
from typing import Callable, Dict, Optional

from ..models.options import OAuthOptions
from ..models.request import OAuthRequest
from ..models.credentials import Token
from .models import SignedAuthorization
from .nonce import generate_nonce
from .signature import generate_signature

logger = logging.getLogger(__name__)


def generate_authorization(
    request: OAuthRequest,
    options: OAuthOptions,
    token: Optional[Token] = None,
    *,
    clock: Optional[Callable[[], float]] = None,
    nonce_factory: Optional[Callable[[int], str]] = None
) -> SignedAuthorization:
    """
    Build and sign the OAuth parameters of a request.

    Nonce and timestamp are taken from the options when given, otherwise
    they are generated for this call, so two calls without them never
    produce the same signature.

    Args:
        request: Request to sign
        options: Signing options with consumer credentials
        token: Optional access token
        clock: Returns the current Unix time in seconds (default: time.time)
        nonce_factory: Returns a nonce of the requested length
            (default: generate_nonce)

    Returns:
        SignedAuthorization with the parameters and header rendering
    """
    clock = clock or time.time
    nonce_factory = nonce_factory or generate_nonce
    consumer = options.consumer

    oauth_data: Dict[str, str] = {
        'oauth_consumer_key': consumer.key or '',
        'oauth_nonce': options.nonce if options.nonce is not None else nonce_factory(options.nonce_length),
        'oauth_signature_method': options.signature_method.value,
        'oauth_timestamp': options.timestamp if options.timestamp is not None else str(math.floor(clock() + 0.5)),
        'oauth_version': options.version,
    }

    if token and token.key:
        oauth_data['oauth_token'] = token.key

    oauth_data['oauth_signature'] = generate_signature(
        request,
        oauth_data,
        consumer.secret,
        token.secret if token else None,
        options.encode_signature,
        options.signature_method
    )

    logger.debug("Request signed", extra={
        'method': request.method.value,
        'url': request.base_url,
        'signature_method': options.signature_method.value,
        'with_token': 'oauth_token' in oauth_data
    })

    return SignedAuthorization(
        parameters=oauth_data,
        header_options=options.header_options()
    )


def authorize(
    request: OAuthRequest,
    options: OAuthOptions,
    token: Optional[Token] = None,
    **kwargs
) -> str:
    """
    Sign a request and return its Authorization header value.

    Args:
        request: Request to sign
        options: Signing options with consumer credentials
        token: Optional access token
        **kwargs: clock / nonce_factory, see generate_authorization()

    Returns:
        Authorization header value
    """
    return generate_authorization(request, options, token, **kwargs).to_header()
