"""Default values for the created_at/updated_at audit columns."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Aware UTC "now", used as column default and onupdate."""
    return datetime.now(timezone.utc)
