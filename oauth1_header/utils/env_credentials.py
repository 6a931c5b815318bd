"""
Credential loading utilities for scripts.
"""
import os
import sys
from typing import Optional, Tuple
from dotenv import load_dotenv

from oauth1_header.models import Consumer, Token


def get_credentials_from_env(require_token: bool = False) -> Tuple[Consumer, Optional[Token]]:
    """
    Load OAuth credentials from environment variables (and a .env file).

    Environment variables:
        OAUTH_CONSUMER_KEY: Consumer key (required)
        OAUTH_CONSUMER_SECRET: Consumer secret (required, may be empty)
        OAUTH_TOKEN: Access token (optional)
        OAUTH_TOKEN_SECRET: Access token secret (optional)

    Args:
        require_token: Exit with an error if OAUTH_TOKEN is not set

    Returns:
        Tuple of (Consumer, Token or None)

    Raises:
        SystemExit: If required environment variables are missing
    """
    load_dotenv()

    consumer_key = os.environ.get('OAUTH_CONSUMER_KEY')
    consumer_secret = os.environ.get('OAUTH_CONSUMER_SECRET')
    token_key = os.environ.get('OAUTH_TOKEN')
    token_secret = os.environ.get('OAUTH_TOKEN_SECRET')

    if not consumer_key:
        print("Error: OAUTH_CONSUMER_KEY environment variable is required")
        sys.exit(1)
    if consumer_secret is None:
        print("Error: OAUTH_CONSUMER_SECRET environment variable is required")
        sys.exit(1)
    if require_token and not token_key:
        print("Error: OAUTH_TOKEN environment variable is required")
        sys.exit(1)

    consumer = Consumer(key=consumer_key, secret=consumer_secret)
    token = Token(key=token_key, secret=token_secret) if token_key else None

    return consumer, token
