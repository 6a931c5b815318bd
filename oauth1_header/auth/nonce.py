"""
Nonce generation for replay protection.
"""
import secrets
import string

from ..models.options import DEFAULT_NONCE_LENGTH

WORD_CHARACTERS = string.ascii_letters + string.digits


def generate_nonce(length: int = DEFAULT_NONCE_LENGTH) -> str:
    """
    Generate a random alphanumeric nonce.

    Uses the secrets module so nonces are not predictable.

    Args:
        length: Number of characters (default: 32)

    Returns:
        Nonce string drawn from [a-zA-Z0-9]
    """
    if length < 0:
        raise ValueError("nonce length must not be negative")
    return ''.join(secrets.choice(WORD_CHARACTERS) for _ in range(length))
