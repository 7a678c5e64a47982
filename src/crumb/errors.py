"""Crumb exception hierarchy.

Shared across the slice index, Cookie, header helpers, and config so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when a ``CookieConfig`` is invalid.

    Typically caught at startup, when the config is created.
    """


@dataclass(frozen=True, slots=True)
class MalformedCookie(CrumbError, ValueError):  # noqa: N818
    """The cookie-pair of a ``Set-Cookie`` value cannot be parsed.

    Raised by ``Cookie.parse`` and ``Cookie.from_parts``. No partial
    cookie is ever returned alongside it.
    """

    raw: str
    reason: str = "malformed cookie-pair"

    def __str__(self) -> str:
        return f"{self.reason}: {self.raw!r}"


@dataclass(frozen=True, slots=True)
class InvalidOperation(CrumbError):  # noqa: N818
    """A mutation would break a structural invariant of the cookie.

    Removing ``name`` or ``value``, or setting an empty or unsafe name.
    The buffer is left unchanged.
    """

    detail: str

    def __str__(self) -> str:
        return self.detail
