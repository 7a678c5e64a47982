"""Cookie-date helpers for the ``Expires`` attribute.

Serializes as RFC 1123 ``IMF-fixdate`` (``Thu, 22 Mar 2012 14:53:18 GMT``);
parses the RFC 1123, RFC 850 and asctime forms that ``email.utils``
understands.
"""

from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime

# Used by Cookie.expire()
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def format_cookie_date(dt: datetime) -> str:
    """Format *dt* as an HTTP date in GMT. Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return format_datetime(dt.astimezone(UTC), usegmt=True)


def parse_cookie_date(text: str) -> datetime | None:
    """Parse an HTTP date into an aware UTC datetime, or ``None``."""
    try:
        dt = parsedate_to_datetime(text.strip())
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
