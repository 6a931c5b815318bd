"""
Signing and header rendering options.
"""
from typing import Optional, Union
from dataclasses import dataclass
from enum import Enum

from .credentials import Consumer


DEFAULT_NONCE_LENGTH = 32
DEFAULT_VERSION = '1.0'
DEFAULT_PARAMETER_SEPARATOR = ', '


class UnsupportedSignatureMethodError(ValueError):
    """Raised when a signature method other than HMAC-SHA1/HMAC-SHA256 is requested."""


class SignatureMethod(Enum):
    """Supported OAuth signature methods."""
    HMAC_SHA1 = "HMAC-SHA1"
    HMAC_SHA256 = "HMAC-SHA256"

    @classmethod
    def from_string(cls, value: Union[str, 'SignatureMethod']) -> 'SignatureMethod':
        """
        Resolve a signature method name.

        Args:
            value: Enum member or method name such as "HMAC-SHA1"

        Returns:
            SignatureMethod member

        Raises:
            UnsupportedSignatureMethodError: If the name is not supported
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            supported = ', '.join(m.value for m in cls)
            raise UnsupportedSignatureMethodError(
                f"Unsupported signature method {value!r} (supported: {supported})"
            ) from None


@dataclass
class HeaderOptions:
    """Options that only affect rendering of the Authorization header."""
    realm: Optional[str] = None
    parameter_separator: str = DEFAULT_PARAMETER_SEPARATOR


@dataclass
class OAuthOptions:
    """
    Options for generating an OAuth 1.0a authorization.

    Attributes:
        consumer: Consumer credentials (required)
        nonce: Explicit nonce; generated per call when None
        nonce_length: Length of generated nonces (default: 32)
        timestamp: Explicit Unix timestamp string; current time when None
        version: oauth_version value (default: "1.0")
        signature_method: HMAC-SHA1 (default) or HMAC-SHA256
        realm: Optional realm for the Authorization header
        parameter_separator: Separator between header parameters (default: ", ")
        encode_signature: Percent-encode the signature value once more.
            Only for embedding outside the header, since header rendering
            encodes values itself.
    """
    consumer: Consumer
    nonce: Optional[str] = None
    nonce_length: int = DEFAULT_NONCE_LENGTH
    timestamp: Optional[str] = None
    version: str = DEFAULT_VERSION
    signature_method: SignatureMethod = SignatureMethod.HMAC_SHA1
    realm: Optional[str] = None
    parameter_separator: str = DEFAULT_PARAMETER_SEPARATOR
    encode_signature: bool = False

    def __post_init__(self) -> None:
        self.signature_method = SignatureMethod.from_string(self.signature_method)

        if self.nonce_length < 0:
            raise ValueError("nonce_length must not be negative")

    def header_options(self) -> HeaderOptions:
        """Return the header rendering subset of these options."""
        return HeaderOptions(
            realm=self.realm,
            parameter_separator=self.parameter_separator
        )
