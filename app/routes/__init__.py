"""
API routes for the user gateway
"""

from . import health, users

__all__ = ["health", "users"]
