"""
Consumer and token credential models.
"""
from typing import Optional
from dataclasses import dataclass


@dataclass
class Consumer:
    """
    OAuth consumer (client) credentials.

    The secret may be an empty string but must always be present, since it
    is part of the signing key.
    """
    key: str
    secret: str

    def __post_init__(self) -> None:
        if self.secret is None:
            raise ValueError("consumer secret must be a string (use '' for none)")

    def __repr__(self) -> str:
        return f"Consumer(key={self.key!r}, secret='***')"


@dataclass
class Token:
    """Per-user access token credentials."""
    key: Optional[str] = None
    secret: Optional[str] = None

    def __repr__(self) -> str:
        secret = "'***'" if self.secret else repr(self.secret)
        return f"Token(key={self.key!r}, secret={secret})"
