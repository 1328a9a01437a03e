"""
Session Token value type.
Holds what the client stores in the session cookie, independent of any HTTP framework.
"""
from datetime import datetime, timezone


class SessionToken:
    """Opaque session token with its expiry."""

    def __init__(self, value: str, expires_at: datetime):
        self.value = value
        self.expires_at = expires_at

    @property
    def max_age(self) -> int:
        """Seconds until expiry, never negative."""
        remaining = (self.expires_at - datetime.now(timezone.utc)).total_seconds()
        return max(0, int(remaining))

    def is_expired(self, now: datetime = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at

    def __repr__(self):
        # value is a credential; keep it out of logs
        return f"SessionToken(expires_at={self.expires_at.isoformat()})"
