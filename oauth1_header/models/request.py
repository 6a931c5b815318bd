"""
Request model describing the HTTP request being signed.
"""
from typing import Dict, List, Union
from dataclasses import dataclass, field
from enum import Enum


ParameterValue = Union[str, List[str]]


class HttpMethod(Enum):
    """HTTP methods that can be signed."""
    DELETE = "DELETE"
    GET = "GET"
    PATCH = "PATCH"
    POST = "POST"
    PUT = "PUT"


@dataclass
class OAuthRequest:
    """
    Represents an outgoing HTTP request to be signed.

    Attributes:
        url: Full request URL. Any query string is ignored when building the
            base URL; pass query parameters separately via ``query``.
        method: HTTP method (enum member or its uppercase name)
        query: Query parameters, values may be strings or lists of strings
        body: Form body parameters, same shape as ``query``
    """
    url: str
    method: HttpMethod
    query: Dict[str, ParameterValue] = field(default_factory=dict)
    body: Dict[str, ParameterValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.url:
            raise ValueError("url is required")

        if not isinstance(self.method, HttpMethod):
            self.method = HttpMethod(self.method)

        if self.query is None:
            self.query = {}
        if self.body is None:
            self.body = {}

    @property
    def base_url(self) -> str:
        """URL with the query string (everything from the first ?) removed."""
        return self.url.split('?', 1)[0]

    @classmethod
    def from_dict(cls, data: dict) -> 'OAuthRequest':
        """
        Create an OAuthRequest instance from a dictionary.

        Args:
            data: Dictionary with url, method and optional query/body

        Returns:
            OAuthRequest instance
        """
        return cls(
            url=data['url'],
            method=data['method'],
            query=data.get('query') or {},
            body=data.get('body') or {}
        )

    def to_dict(self) -> dict:
        """
        Convert to dictionary for logging/serialization.

        Returns:
            Dictionary representation of the request
        """
        return {
            'url': self.url,
            'method': self.method.value,
            'query': dict(self.query),
            'body': dict(self.body)
        }
