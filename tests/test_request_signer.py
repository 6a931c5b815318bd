"""
Unit tests for the client-side RequestSigner.
"""
import pytest

from oauth1_header import RequestSigner, UnsupportedSignatureMethodError

GOLDEN_HEADER = (
    'OAuth oauth_consumer_key="ck", oauth_nonce="fixedNonce", '
    'oauth_signature="HwjcEvGnFaCNzSBI%2Brez9HPhOV0%3D", '
    'oauth_signature_method="HMAC-SHA1", oauth_timestamp="1000", oauth_version="1.0"'
)


@pytest.fixture
def signer(consumer):
    """Signer with fixed nonce and timestamp."""
    return RequestSigner(consumer, nonce='fixedNonce', timestamp='1000')


class TestRequestSigner:
    """Test request signing helpers."""

    def test_sign_get_golden(self, signer):
        """Test the reference GET request through the signer."""
        assert signer.sign_get('https://example.com/resource') == GOLDEN_HEADER

    def test_sign_request_matches_sign_get(self, signer):
        """Test that sign_request and sign_get agree."""
        url = 'https://example.com/resource'

        assert signer.sign_request('GET', url, {'a': '1'}) == signer.sign_get(url, {'a': '1'})

    def test_with_token(self, consumer, token):
        """Test that the bound token is included."""
        signer = RequestSigner(consumer, token, nonce='fixedNonce', timestamp='1000')

        header = signer.sign_get(
            'https://example.com/resource?ignored=1',
            {'tags': ['b', 'a'], 'q': 'hello world'}
        )

        assert 'oauth_token="tk"' in header
        assert 'oauth_signature="SPQtmPr7hQBf%2FxU%2FoqhInjUt0X4%3D"' in header

    def test_method_shortcuts(self, signer):
        """Test that each shortcut produces a distinct signature."""
        url = 'https://example.com/resource'
        headers = {
            signer.sign_get(url),
            signer.sign_post(url, {'a': '1'}),
            signer.sign_put(url),
            signer.sign_patch(url),
            signer.sign_delete(url),
        }

        assert len(headers) == 5
        assert all(h.startswith('OAuth oauth_consumer_key="ck"') for h in headers)

    def test_option_overrides(self, signer):
        """Test that per-request options override the defaults."""
        header = signer.sign_get('https://example.com/resource', realm='Example', signature_method='HMAC-SHA256')

        assert header.startswith('OAuth realm="Example", ')
        assert 'oauth_signature_method="HMAC-SHA256"' in header

    def test_invalid_signature_method(self, consumer):
        """Test that an invalid signature method fails when signing."""
        signer = RequestSigner(consumer, signature_method='PLAINTEXT')

        with pytest.raises(UnsupportedSignatureMethodError):
            signer.sign_get('https://example.com/resource')

    def test_fresh_nonce_per_request(self, consumer):
        """Test that headers differ when no nonce is fixed."""
        signer = RequestSigner(consumer)

        assert signer.sign_get('https://example.com/') != signer.sign_get('https://example.com/')
