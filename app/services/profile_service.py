"""
Profile Service
Builds the enriched profile view of a user fetched from the data service
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional


class ProfileError(ValueError):
    """Raised when a fetched user cannot be turned into a profile"""


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def email_domain(email: Any) -> str:
    """Text after the first '@', or an empty string when there is none"""
    if not isinstance(email, str) or "@" not in email:
        return ""
    return email.split("@", 1)[1]


def build_profile(
    user: Mapping[str, Any],
    now: Optional[datetime] = None,
    user_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Copy every user field, then overwrite the derived ones by name

    Args:
        user: User record as returned by the data service
        now: Capture time, defaults to the current wall-clock time
        user_id: Requested id, used in profileUrl when the record has no id

    Returns:
        New profile mapping; the input is left untouched
    """
    if not isinstance(user, Mapping):
        raise ProfileError(f"Expected a user object, got {type(user).__name__}")

    captured_at = now or datetime.now(timezone.utc)
    name = user.get("name")

    profile = dict(user)
    profile["displayName"] = name.upper() if isinstance(name, str) else ""
    profile["emailDomain"] = email_domain(user.get("email"))
    profile["isAdmin"] = user.get("role") == "admin"
    profile_id = user.get("id")
    if profile_id is None:
        profile_id = user_id
    profile["profileUrl"] = f"/api/users/{profile_id}/profile"
    profile["timestamp"] = format_timestamp(captured_at)
    return profile
