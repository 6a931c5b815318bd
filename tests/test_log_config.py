"""
Unit tests for JSON logging setup.
"""
import json
import logging
import pytest
from pythonjsonlogger import jsonlogger

from oauth1_header.log_config import setup_json_logging
from oauth1_header import OAuthOptions, generate_authorization


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove JSON handlers and restore the root level after each test."""
    level = logging.root.level
    yield
    for handler in logging.root.handlers[:]:
        if isinstance(handler.formatter, jsonlogger.JsonFormatter):
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)


class TestSetupJsonLogging:
    """Test structured logging configuration."""

    def test_level_argument(self):
        """Test that an explicit level is applied."""
        root = setup_json_logging('debug')

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_level_from_env(self, monkeypatch):
        """Test that LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv('LOG_LEVEL', 'WARNING')

        assert setup_json_logging().level == logging.WARNING

    def test_unknown_level_defaults_to_info(self, monkeypatch):
        """Test fallback to INFO for unknown level names."""
        monkeypatch.delenv('LOG_LEVEL', raising=False)

        assert setup_json_logging('chatty').level == logging.INFO

    def test_json_output(self, capsys):
        """Test that records are emitted as JSON with extra fields."""
        setup_json_logging('INFO')

        logging.getLogger('oauth1_header.test').info("Signed", extra={'url': 'https://example.com/'})

        record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert record['message'] == 'Signed'
        assert record['url'] == 'https://example.com/'
        assert record['levelname'] == 'INFO'

    def test_debug_logs_do_not_contain_secrets(self, capsys, get_request, consumer):
        """Test that signing at DEBUG level never logs secrets."""
        setup_json_logging('DEBUG')
        consumer.secret = 'very-secret-value'
        options = OAuthOptions(consumer=consumer, nonce='n', timestamp='1')

        generate_authorization(get_request, options)

        err = capsys.readouterr().err
        assert 'base_string' in err
        assert 'very-secret-value' not in err
