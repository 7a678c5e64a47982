"""Cookie: a ``Set-Cookie`` value kept as one serialized string.

The buffer *is* the serialization. Every mutator splices it immediately
and shifts the offset table, so ``to_string()`` is a plain read and
accessors are plain slices::

    cookie = Cookie.parse("id=42; Secure; Path=/")
    cookie.set_max_age(3600).set_httponly(True)
    str(cookie)  # "id=42; Secure; Path=/; Max-Age=3600; HttpOnly"

Attributes keep first-set order. Unrecognized attribute names, and values
RFC 6265 §5.2 says to ignore, are dropped without raising.
"""

import logging
from collections.abc import Hashable
from datetime import datetime

from crumb._internal.dates import EPOCH, format_cookie_date, parse_cookie_date
from crumb._internal.slices import MANDATORY_FIELDS, NAME, VALUE, SliceIndex, Span
from crumb.attributes import AttributeKind, has_control_chars, is_flag, normalize_value, recognize
from crumb.errors import InvalidOperation, MalformedCookie

logger = logging.getLogger("crumb.cookie")

# An empty Path means default-path and clears an earlier one; RFC 6265 §5.2
# ignores the cookie-av for these instead.
_IGNORED_WHEN_EMPTY = frozenset(
    {AttributeKind.EXPIRES, AttributeKind.MAX_AGE, AttributeKind.DOMAIN, AttributeKind.SAMESITE}
)


def _pair_problem(name: str, value: str) -> str | None:
    """Why *name*/*value* cannot form a cookie-pair, or ``None`` if they can."""
    if not name:
        return "empty cookie name"
    if "=" in name or ";" in name or any(ch.isspace() for ch in name):
        return "cookie name contains '=', ';' or whitespace"
    if has_control_chars(name):
        return "cookie name contains control characters"
    return _value_problem(value)


def _value_problem(value: str) -> str | None:
    if ";" in value:
        return "cookie value contains ';'"
    if has_control_chars(value):
        return "cookie value contains control characters"
    return None


class Cookie:
    """A single ``Set-Cookie`` value backed by one string buffer.

    ``name`` and ``value`` are always present. Attributes are optional and
    appear at most once each; re-setting one rewrites it in place.

    Not thread-safe. Take a ``copy()`` before handing a cookie to another
    owner.
    """

    __slots__ = ("_index",)

    def __init__(self, name: str, value: str = "") -> None:
        name = name.strip()
        value = value.strip()
        problem = _pair_problem(name, value)
        if problem is not None:
            raise MalformedCookie(f"{name}={value}", problem)
        self._index = SliceIndex()
        self._index.set(NAME, name, 0)
        self._index.set(VALUE, f"={value}", 1)

    # -- construction ------------------------------------------------------

    @classmethod
    def from_parts(cls, name: str, value: str) -> "Cookie":
        """Build a cookie with no attributes."""
        return cls(name, value)

    @classmethod
    def parse(cls, raw: str) -> "Cookie":
        """Parse a ``Set-Cookie`` header value.

        The first ``;``-separated segment must be ``name=value`` with a
        non-empty name. Each later segment is ``Attr=Val`` or a bare
        ``Attr``. Unrecognized or invalid attributes are dropped; a repeated
        attribute overrides the earlier one in place.

        Raises:
            MalformedCookie: The cookie-pair has no ``=``, an empty name, or
                a name or value that cannot appear in a header.
        """
        pair, *segments = raw.split(";")
        name, sep, value = pair.partition("=")
        if not sep:
            raise MalformedCookie(raw, "cookie-pair has no '='")
        if not name.strip():
            raise MalformedCookie(raw, "empty cookie name")

        cookie = cls(name, value)
        for segment in segments:
            segment = segment.strip()
            if not segment:
                continue
            attr, sep, attr_value = segment.partition("=")
            kind = recognize(attr)
            if sep and not attr_value.strip() and kind in _IGNORED_WHEN_EMPTY:
                logger.debug("Ignoring %s with empty value", kind.value)
                continue
            cookie.set_attribute(attr, attr_value if sep else None)
        return cookie

    def copy(self) -> "Cookie":
        """Independent clone sharing no mutable state."""
        clone = Cookie.__new__(Cookie)
        clone._index = self._index.copy()
        return clone

    __copy__ = copy

    # -- serialization -----------------------------------------------------

    def to_string(self) -> str:
        """The ``Set-Cookie`` value. The buffer is returned as-is."""
        return self._index.text

    def __str__(self) -> str:
        return self._index.text

    def __repr__(self) -> str:
        return f"Cookie({self._index.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cookie):
            return NotImplemented
        return self._index.text == other._index.text

    __hash__ = None  # type: ignore[assignment]

    # -- cookie-pair -------------------------------------------------------

    @property
    def name(self) -> str:
        return self._slice(NAME)

    @property
    def value(self) -> str:
        return self._slice(VALUE)

    @property
    def pair(self) -> tuple[str, str]:
        """``(name, value)``."""
        return self._slice(NAME), self._slice(VALUE)

    def set_name(self, name: str) -> "Cookie":
        """Replace the name. Surrounding whitespace is trimmed.

        Raises:
            InvalidOperation: The name is empty or contains ``=``, ``;``,
                whitespace or a control character.
        """
        name = name.strip()
        problem = _pair_problem(name, "")
        if problem is not None:
            raise InvalidOperation(problem)
        self._index.set(NAME, name, 0)
        return self

    def set_value(self, value: str) -> "Cookie":
        """Replace the value. Surrounding whitespace is trimmed.

        Raises:
            InvalidOperation: The value contains ``;`` or a control character.
        """
        value = value.strip()
        problem = _value_problem(value)
        if problem is not None:
            raise InvalidOperation(problem)
        self._index.set(VALUE, f"={value}", 1)
        return self

    # -- attributes --------------------------------------------------------

    @property
    def attributes(self) -> tuple[tuple[AttributeKind, str | None], ...]:
        """Present attributes in buffer order. Flags carry ``None``."""
        result: list[tuple[AttributeKind, str | None]] = []
        for field in self._index.fields():
            if field in MANDATORY_FIELDS:
                continue
            kind = AttributeKind(field)
            result.append((kind, None if is_flag(kind) else self._slice(kind)))
        return tuple(result)

    def has_attribute(self, name: str) -> bool:
        kind = recognize(name)
        return kind is not None and kind in self._index

    def get_attribute(self, name: str) -> str | None:
        """Value of attribute *name*, ``""`` for a present flag, else ``None``."""
        kind = recognize(name)
        if kind is None:
            return None
        span = self._index.get(kind)
        return None if span is None else self._index.slice(span)

    def set_attribute(self, name: str, value: str | None = None) -> "Cookie":
        """Set attribute *name* (an ``AttributeKind`` or its wire name).

        Unrecognized names and unacceptable values are ignored. Flags ignore
        *value*. An empty value for a valued attribute removes it.
        """
        kind = recognize(name)
        if kind is None:
            logger.debug("Ignoring unrecognized cookie attribute %r", name)
            return self
        text = normalize_value(kind, value)
        if text is None:
            logger.debug("Ignoring %s with unacceptable value %r", kind.value, value)
            return self
        if is_flag(kind):
            segment = f"; {kind.value}"
            self._index.set(kind, segment, len(segment))
        elif not text:
            self._index.remove(kind)
        else:
            self._index.set(kind, f"; {kind.value}={text}", len(kind.value) + 3)
        return self

    def remove_attribute(self, name: str) -> "Cookie":
        """Remove attribute *name* if present. Unknown names are a no-op."""
        kind = recognize(name)
        if kind is not None:
            self._index.remove(kind)
        return self

    def remove(self, field: str) -> "Cookie":
        """Remove *field*: an attribute name, or ``"name"``/``"value"``.

        Raises:
            InvalidOperation: *field* is ``"name"`` or ``"value"``.
        """
        if field in MANDATORY_FIELDS:
            self._index.remove(field)
        return self.remove_attribute(field)

    def span(self, field: str) -> Span | None:
        """Recorded value range of *field* in ``to_string()``, or ``None``."""
        key: Hashable | None = field if field in MANDATORY_FIELDS else recognize(field)
        if key is None:
            return None
        return self._index.get(key)

    # -- typed helpers -----------------------------------------------------

    @property
    def domain(self) -> str | None:
        return self.get_attribute(AttributeKind.DOMAIN)

    def set_domain(self, domain: str) -> "Cookie":
        """Set ``Domain``. An empty or blank string removes it."""
        return self.set_attribute(AttributeKind.DOMAIN, domain)

    @property
    def path(self) -> str | None:
        return self.get_attribute(AttributeKind.PATH)

    def set_path(self, path: str) -> "Cookie":
        """Set ``Path``. An empty or blank string removes it."""
        return self.set_attribute(AttributeKind.PATH, path)

    @property
    def max_age(self) -> int | None:
        text = self.get_attribute(AttributeKind.MAX_AGE)
        return None if text is None else int(text)

    def set_max_age(self, seconds: int | None) -> "Cookie":
        """Set ``Max-Age`` in seconds. ``None`` removes it; ``0`` expires now."""
        if seconds is None:
            return self.remove_attribute(AttributeKind.MAX_AGE)
        return self.set_attribute(AttributeKind.MAX_AGE, str(int(seconds)))

    @property
    def expires(self) -> datetime | None:
        """``Expires`` as an aware UTC datetime."""
        text = self.get_attribute(AttributeKind.EXPIRES)
        return None if text is None else parse_cookie_date(text)

    def set_expires(self, when: datetime | None) -> "Cookie":
        """Set ``Expires``. Naive datetimes are taken as UTC; ``None`` removes it."""
        if when is None:
            return self.remove_attribute(AttributeKind.EXPIRES)
        return self.set_attribute(AttributeKind.EXPIRES, format_cookie_date(when))

    @property
    def secure(self) -> bool:
        return AttributeKind.SECURE in self._index

    def set_secure(self, secure: bool) -> "Cookie":
        return self._set_flag(AttributeKind.SECURE, secure)

    @property
    def httponly(self) -> bool:
        return AttributeKind.HTTPONLY in self._index

    def set_httponly(self, httponly: bool) -> "Cookie":
        return self._set_flag(AttributeKind.HTTPONLY, httponly)

    @property
    def samesite(self) -> str | None:
        return self.get_attribute(AttributeKind.SAMESITE)

    def set_samesite(self, samesite: str | None) -> "Cookie":
        """Set ``SameSite`` to ``Strict``, ``Lax`` or ``None`` (any case).

        Python ``None`` removes the attribute; other values are ignored.
        """
        if samesite is None:
            return self.remove_attribute(AttributeKind.SAMESITE)
        return self.set_attribute(AttributeKind.SAMESITE, samesite)

    def expire(self) -> "Cookie":
        """Mark the cookie for deletion: ``Max-Age=0`` and an ``Expires`` in 1970."""
        return self.set_max_age(0).set_expires(EPOCH)

    # -- internals ---------------------------------------------------------

    def _set_flag(self, kind: AttributeKind, present: bool) -> "Cookie":
        if present:
            return self.set_attribute(kind)
        return self.remove_attribute(kind)

    def _slice(self, field: Hashable) -> str:
        span = self._index.get(field)
        if span is None:
            msg = f"{field} is not present in the cookie"
            raise InvalidOperation(msg)
        return self._index.slice(span)


def parse_set_cookie(raw: str) -> Cookie:
    """Module-level alias for ``Cookie.parse``."""
    return Cookie.parse(raw)
