from datetime import UTC, datetime
from urllib.parse import urlsplit


def now() -> datetime:
    return datetime.now(UTC)


def is_local_path(value: str) -> bool:
    """Check that a redirect target stays on this site (absolute path, no scheme or host)."""
    if not value.startswith("/") or value.startswith("//") or "\\" in value:
        return False
    parts = urlsplit(value)
    return not parts.scheme and not parts.netloc
