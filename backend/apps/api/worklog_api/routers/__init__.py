"""
API router modules.

This package contains all API route handlers organized by domain.
"""

from . import entries, users

__all__ = [
    "entries",
    "users",
]
