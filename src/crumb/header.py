"""Cookie header helpers.

The read side of a request (``Cookie:``) and bulk parsing of response
``Set-Cookie`` values, next to the single-cookie model in ``crumb.cookie``.
"""

import logging
from collections.abc import Iterable

from crumb.cookie import Cookie
from crumb.errors import MalformedCookie

logger = logging.getLogger("crumb.header")


def parse_cookie_header(header: str) -> dict[str, str]:
    """Map a request ``Cookie:`` value to ``{name: value}``.

    Pairs without ``=`` or with a blank name are skipped. A name sent twice
    keeps its last value. Nothing here raises; a missing header gives ``{}``.
    """
    result: dict[str, str] = {}
    for chunk in (header or "").split(";"):
        name, sep, value = chunk.partition("=")
        name = name.strip()
        if not sep or not name:
            if chunk.strip():
                logger.debug("Skipping cookie-pair without a name: %r", chunk)
            continue
        result[name] = value.strip()
    return result


def build_cookie_header(cookies: Iterable[Cookie]) -> str:
    """Serialize cookie-pairs into a ``Cookie`` request header value.

    Attributes are never sent back to the server, only ``name=value``.
    """
    return "; ".join(f"{name}={value}" for name, value in (c.pair for c in cookies))


def parse_set_cookie_headers(values: Iterable[str]) -> list[Cookie]:
    """Parse several ``Set-Cookie`` values, skipping malformed ones."""
    cookies: list[Cookie] = []
    for raw in values:
        try:
            cookies.append(Cookie.parse(raw))
        except MalformedCookie as exc:
            logger.warning("Skipping malformed Set-Cookie value: %s", exc)
    return cookies
