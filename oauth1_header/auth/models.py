"""
Signing result data models.
"""
from types import MappingProxyType
from typing import Mapping, Optional
from dataclasses import dataclass, field

from ..models.options import HeaderOptions
from .header import generate_header


@dataclass(frozen=True)
class SignedAuthorization:
    """
    Result of signing a request.

    Attributes:
        parameters: Signed oauth_* parameters, including oauth_signature.
            Stored as a read-only view; use to_dict() for a mutable copy.
        header_options: Header options captured from the signing options,
            used by to_header() when no options are given at render time
    """
    parameters: Mapping[str, str]
    header_options: HeaderOptions = field(default_factory=HeaderOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters)))

    @property
    def signature(self) -> str:
        """The oauth_signature value."""
        return self.parameters['oauth_signature']

    def to_header(self, header_options: Optional[HeaderOptions] = None) -> str:
        """
        Render the Authorization header value.

        Args:
            header_options: Overrides the captured header options

        Returns:
            Header value starting with "OAuth "
        """
        return generate_header(self.parameters, header_options or self.header_options)

    def __getitem__(self, key: str) -> str:
        return self.parameters[key]

    def __contains__(self, key: object) -> bool:
        return key in self.parameters

    def to_dict(self) -> dict:
        """
        Convert to dictionary for logging/serialization.

        Returns:
            Copy of the signed parameters
        """
        return dict(self.parameters)
