"""Cookie defaults.

CookieConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from crumb.attributes import normalize_samesite
from crumb.cookie import Cookie
from crumb.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Attributes applied to every cookie baked from this config.

    All fields have sensible defaults. Override what you need::

        config = CookieConfig(secure=True, samesite="Strict")
        cookie = config.bake("session", token)
    """

    max_age: int | None = None
    path: str | None = "/"
    domain: str | None = None
    secure: bool = False
    httponly: bool = True
    samesite: str | None = "Lax"

    def __post_init__(self) -> None:
        if self.samesite is not None:
            canonical = normalize_samesite(self.samesite)
            if canonical is None:
                msg = f"samesite must be 'Strict', 'Lax' or 'None', got {self.samesite!r}"
                raise ConfigurationError(msg)
            if canonical == "None" and not self.secure:
                msg = "samesite='None' requires secure=True"
                raise ConfigurationError(msg)
        if self.path and not self.path.startswith("/"):
            msg = f"path must start with '/', got {self.path!r}"
            raise ConfigurationError(msg)

    def bake(self, name: str, value: str) -> Cookie:
        """Build a ``Cookie`` with these defaults applied.

        Attributes are written in the order Max-Age, Path, Domain, Secure,
        HttpOnly, SameSite.
        """
        cookie = Cookie.from_parts(name, value)
        cookie.set_max_age(self.max_age)
        if self.path:
            cookie.set_path(self.path)
        if self.domain:
            cookie.set_domain(self.domain)
        cookie.set_secure(self.secure)
        cookie.set_httponly(self.httponly)
        cookie.set_samesite(self.samesite)
        return cookie
