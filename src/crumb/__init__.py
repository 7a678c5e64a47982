"""Crumb: RFC 6265 ``Set-Cookie`` values backed by a single string.

The serialized form is the storage: accessors slice it, mutators splice
it, and an offset table keeps every field's position current.

Basic usage::

    from crumb import Cookie

    cookie = Cookie.parse("id=42; Secure; Path=/")
    cookie.path            # "/"
    cookie.set_max_age(3600)
    str(cookie)            # "id=42; Secure; Path=/; Max-Age=3600"

Defaults for new cookies::

    from crumb import CookieConfig

    CookieConfig(secure=True).bake("session", "abc")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AttributeKind",
    "ConfigurationError",
    "Cookie",
    "CookieConfig",
    "CrumbError",
    "InvalidOperation",
    "MalformedCookie",
    "Span",
    "build_cookie_header",
    "parse_cookie_header",
    "parse_set_cookie",
    "parse_set_cookie_headers",
    "recognize",
]

# Public name -> (module, attribute)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "AttributeKind": ("crumb.attributes", "AttributeKind"),
    "ConfigurationError": ("crumb.errors", "ConfigurationError"),
    "Cookie": ("crumb.cookie", "Cookie"),
    "CookieConfig": ("crumb.config", "CookieConfig"),
    "CrumbError": ("crumb.errors", "CrumbError"),
    "InvalidOperation": ("crumb.errors", "InvalidOperation"),
    "MalformedCookie": ("crumb.errors", "MalformedCookie"),
    "Span": ("crumb._internal.slices", "Span"),
    "build_cookie_header": ("crumb.header", "build_cookie_header"),
    "parse_cookie_header": ("crumb.header", "parse_cookie_header"),
    "parse_set_cookie": ("crumb.cookie", "parse_set_cookie"),
    "parse_set_cookie_headers": ("crumb.header", "parse_set_cookie_headers"),
    "recognize": ("crumb.attributes", "recognize"),
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import crumb`` fast while providing a clean top-level API.
    """
    target = _LAZY_IMPORTS.get(name)
    if target is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    module_name, attr = target
    return getattr(importlib.import_module(module_name), attr)
