"""
Data models for OAuth 1.0a request signing.
"""
from .request import OAuthRequest, HttpMethod
from .credentials import Consumer, Token
from .options import (
    OAuthOptions,
    HeaderOptions,
    SignatureMethod,
    UnsupportedSignatureMethodError,
)

__all__ = [
    'OAuthRequest',
    'HttpMethod',
    'Consumer',
    'Token',
    'OAuthOptions',
    'HeaderOptions',
    'SignatureMethod',
    'UnsupportedSignatureMethodError',
]
