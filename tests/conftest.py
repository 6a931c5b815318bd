"""
Pytest configuration and fixtures for OAuth signing tests.
Fixed nonce/timestamp fixtures keep signatures reproducible.
"""
import pytest

from oauth1_header import Consumer, Token, OAuthOptions, OAuthRequest, HttpMethod


FIXED_NONCE = 'fixedNonce'
FIXED_TIMESTAMP = '1000'


@pytest.fixture
def consumer():
    """Consumer credentials used by the golden vectors."""
    return Consumer(key='ck', secret='cs')


@pytest.fixture
def token():
    """Access token credentials."""
    return Token(key='tk', secret='ts')


@pytest.fixture
def get_request():
    """Plain GET request without parameters."""
    return OAuthRequest(url='https://example.com/resource', method=HttpMethod.GET)


@pytest.fixture
def fixed_options(consumer):
    """Options with explicit nonce and timestamp."""
    return OAuthOptions(consumer=consumer, nonce=FIXED_NONCE, timestamp=FIXED_TIMESTAMP)
