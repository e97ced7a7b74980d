"""
Authentication helpers.
"""

from .jwt import JWTConfig, TokenData, create_access_token, verify_token

__all__ = [
    "JWTConfig",
    "TokenData",
    "create_access_token",
    "verify_token",
]
