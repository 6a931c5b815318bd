#!/usr/bin/env python
"""
Print an OAuth 1.0a Authorization header for a request.

Credentials are read from OAUTH_CONSUMER_KEY / OAUTH_CONSUMER_SECRET and
optionally OAUTH_TOKEN / OAUTH_TOKEN_SECRET (environment or .env file).

Usage:
  python scripts/sign_request.py GET https://api.example.com/1/items -q page=2
  python scripts/sign_request.py POST https://api.example.com/1/items --realm example --sha256
"""

import sys
import argparse
import logging

from oauth1_header import (
    OAuthRequest,
    OAuthOptions,
    SignatureMethod,
    generate_authorization,
)
from oauth1_header.log_config import setup_json_logging
from oauth1_header.utils import get_credentials_from_env

logger = logging.getLogger(__name__)


def parse_pairs(pairs: list) -> dict:
    """Parse repeated key=value arguments; repeated keys become lists."""
    params = {}
    for pair in pairs or []:
        if '=' not in pair:
            raise ValueError(f"Expected key=value, got {pair!r}")
        key, value = pair.split('=', 1)
        if key in params:
            existing = params[key]
            params[key] = existing + [value] if isinstance(existing, list) else [existing, value]
        else:
            params[key] = value
    return params


def main():
    """Sign a request and print the Authorization header."""
    parser = argparse.ArgumentParser(description='Generate an OAuth 1.0a Authorization header')
    parser.add_argument('method', help='HTTP method (GET, POST, PUT, PATCH, DELETE)')
    parser.add_argument('url', help='Request URL')
    parser.add_argument('-q', '--query', action='append', metavar='KEY=VALUE',
                        help='Query parameter (repeatable)')
    parser.add_argument('--realm', help='Realm to include in the header')
    parser.add_argument('--sha256', action='store_true',
                        help='Sign with HMAC-SHA256 instead of HMAC-SHA1')
    parser.add_argument('--nonce', help='Use a fixed nonce')
    parser.add_argument('--timestamp', help='Use a fixed timestamp')
    parser.add_argument('--show-params', action='store_true',
                        help='Also print the signed oauth_* parameters')
    parser.add_argument('--log-level', default=None, help='Log level (default: LOG_LEVEL or INFO)')
    args = parser.parse_args()

    setup_json_logging(args.log_level)

    consumer, token = get_credentials_from_env()

    try:
        request = OAuthRequest(
            url=args.url,
            method=args.method.upper(),
            query=parse_pairs(args.query)
        )
        options = OAuthOptions(
            consumer=consumer,
            nonce=args.nonce,
            timestamp=args.timestamp,
            realm=args.realm,
            signature_method=SignatureMethod.HMAC_SHA256 if args.sha256 else SignatureMethod.HMAC_SHA1
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    authorization = generate_authorization(request, options, token)
    logger.info("Generated authorization header", extra={'url': request.base_url})

    if args.show_params:
        for key, value in sorted(authorization.to_dict().items()):
            print(f"{key}: {value}")
        print()

    print(authorization.to_header())


if __name__ == '__main__':
    main()
