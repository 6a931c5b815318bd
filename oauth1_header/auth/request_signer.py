"""
Request signing utility for OAuth 1.0a (client-side usage).
"""
from typing import Any, Dict, Optional, Union

from ..models.credentials import Consumer, Token
from ..models.options import OAuthOptions
from ..models.request import HttpMethod, OAuthRequest
from .authorization import authorize


class RequestSigner:
    """
    Client-side request signer bound to a consumer and an optional token.

    Useful for:
    - Building API client SDKs
    - Signing ad-hoc requests in scripts and tests

    Header format:
    OAuth oauth_consumer_key="...", oauth_nonce="...", oauth_signature="...", ...
    """

    def __init__(self, consumer: Consumer, token: Optional[Token] = None, **default_options: Any):
        """
        Initialize the request signer.

        Args:
            consumer: Consumer credentials
            token: Optional access token used for every request
            **default_options: OAuthOptions fields applied to every request
                (e.g. realm, signature_method)
        """
        self.consumer = consumer
        self.token = token
        self.default_options = default_options

    def sign_request(
        self,
        method: Union[str, HttpMethod],
        url: str,
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        **option_overrides: Any
    ) -> str:
        """
        Generate the OAuth Authorization header for a request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL
            query: Optional query parameters
            body: Optional form body parameters
            **option_overrides: OAuthOptions fields for this request only

        Returns:
            Authorization header value
        """
        request = OAuthRequest(url=url, method=method, query=query or {}, body=body or {})
        options = OAuthOptions(
            consumer=self.consumer,
            **{**self.default_options, **option_overrides}
        )
        return authorize(request, options, self.token)

    def sign_get(self, url: str, query: Optional[Dict[str, Any]] = None, **option_overrides: Any) -> str:
        """Sign a GET request."""
        return self.sign_request(HttpMethod.GET, url, query, **option_overrides)

    def sign_post(
        self,
        url: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        **option_overrides: Any
    ) -> str:
        """Sign a POST request."""
        return self.sign_request(HttpMethod.POST, url, query, body, **option_overrides)

    def sign_put(
        self,
        url: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        **option_overrides: Any
    ) -> str:
        """Sign a PUT request."""
        return self.sign_request(HttpMethod.PUT, url, query, body, **option_overrides)

    def sign_patch(
        self,
        url: str,
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        **option_overrides: Any
    ) -> str:
        """Sign a PATCH request."""
        return self.sign_request(HttpMethod.PATCH, url, query, body, **option_overrides)

    def sign_delete(self, url: str, query: Optional[Dict[str, Any]] = None, **option_overrides: Any) -> str:
        """Sign a DELETE request."""
        return self.sign_request(HttpMethod.DELETE, url, query, **option_overrides)
