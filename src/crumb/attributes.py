"""Recognized cookie attributes (RFC 6265 §5.2).

``AttributeKind`` is the closed set of attribute names a ``Cookie`` will
store. Anything ``recognize`` does not know is ignored by the caller, as
RFC 6265 §5.2 step 6 requires for unrecognized cookie-av names.
"""

import re
from enum import StrEnum

from crumb._internal.dates import parse_cookie_date


class AttributeKind(StrEnum):
    """Attribute names understood by crumb. Values are the wire spelling."""

    EXPIRES = "Expires"
    MAX_AGE = "Max-Age"
    DOMAIN = "Domain"
    PATH = "Path"
    SECURE = "Secure"
    HTTPONLY = "HttpOnly"
    SAMESITE = "SameSite"


FLAG_KINDS: frozenset[AttributeKind] = frozenset({AttributeKind.SECURE, AttributeKind.HTTPONLY})

_BY_LOWER_NAME: dict[str, AttributeKind] = {kind.value.lower(): kind for kind in AttributeKind}

_SAMESITE_VALUES: dict[str, str] = {"strict": "Strict", "lax": "Lax", "none": "None"}

_MAX_AGE_RE = re.compile(r"-?[0-9]+")

_CTL_RE = re.compile(r"[\x00-\x1f\x7f]")


def has_control_chars(text: str) -> bool:
    """True if *text* holds a CTL (RFC 5234), which would break the header."""
    return _CTL_RE.search(text) is not None


def recognize(name: str) -> AttributeKind | None:
    """Map an attribute name to its kind, case-insensitively.

    Returns ``None`` for unrecognized names; that is a normal outcome, not
    an error.
    """
    if isinstance(name, AttributeKind):
        return name
    return _BY_LOWER_NAME.get(name.strip().lower())


def is_flag(kind: AttributeKind) -> bool:
    """True for valueless attributes (``Secure``, ``HttpOnly``)."""
    return kind in FLAG_KINDS


def normalize_samesite(value: str) -> str | None:
    """Canonical ``Strict``/``Lax``/``None`` spelling, or ``None`` if unknown."""
    return _SAMESITE_VALUES.get(value.strip().lower())


def normalize_value(kind: AttributeKind, value: str | None) -> str | None:
    """Return the text to store for *kind*, or ``None`` to ignore the cookie-av.

    Flags always store ``""`` whatever value was supplied. An empty string
    for a valued attribute is returned as-is; callers treat it as removal.
    """
    if kind in FLAG_KINDS:
        return ""
    if value is None:
        return None
    value = value.strip()
    if not value:
        return ""
    if ";" in value or has_control_chars(value):
        return None
    if kind is AttributeKind.MAX_AGE:
        return value if _MAX_AGE_RE.fullmatch(value) else None
    if kind is AttributeKind.SAMESITE:
        return normalize_samesite(value)
    if kind is AttributeKind.EXPIRES:
        return value if parse_cookie_date(value) is not None else None
    return value
