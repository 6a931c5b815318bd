"""
Utility modules for scripts.
"""
from .env_credentials import get_credentials_from_env

__all__ = ['get_credentials_from_env']
