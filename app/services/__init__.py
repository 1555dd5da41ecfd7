"""
Gateway-level processing of user records
"""

from .profile_service import ProfileError, build_profile, email_domain, format_timestamp

__all__ = ["ProfileError", "build_profile", "email_domain", "format_timestamp"]
