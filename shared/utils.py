"""Shared utility functions."""
from datetime import datetime, timezone
from email.utils import format_datetime
from pathlib import Path


def format_rss_date(date: str) -> str:
    """Render a yyyy-mm-dd date in RFC 822 form, or return it unchanged."""
    try:
        parsed = datetime.strptime(date, "%Y-%m-%d").replace(tzinfo=timezone.utc)
    except ValueError:
        return date
    return format_datetime(parsed)


def is_within(path: Path, root: Path) -> bool:
    """Check that `path` resolves to a location inside `root`."""
    try:
        path.resolve().relative_to(root.resolve())
    except ValueError:
        return False
    return True


def join_url(base: str, *parts: str) -> str:
    """Join a site link and path segments with single slashes."""
    url = base.rstrip("/")
    for part in parts:
        url += "/" + part.strip("/")
    return url
