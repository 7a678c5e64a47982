"""``crumb build``: assemble a Set-Cookie value from flags."""

import argparse
import logging
import sys

from crumb.config import CookieConfig
from crumb.cookie import Cookie
from crumb.errors import CrumbError

logger = logging.getLogger("crumb.cli")


def build_cookie(args: argparse.Namespace) -> Cookie:
    """Apply the command-line attributes on top of the optional defaults."""
    if args.defaults:
        cookie = CookieConfig().bake(args.name, args.value)
    else:
        cookie = Cookie.from_parts(args.name, args.value)

    if args.max_age is not None:
        cookie.set_max_age(args.max_age)
    if args.expires is not None:
        cookie.set_attribute("Expires", args.expires)
        if not cookie.has_attribute("Expires"):
            logger.warning("Ignoring unparseable --expires %r", args.expires)
    if args.domain is not None:
        cookie.set_domain(args.domain)
    if args.path is not None:
        cookie.set_path(args.path)
    if args.secure:
        cookie.set_secure(True)
    if args.httponly:
        cookie.set_httponly(True)
    if args.samesite is not None:
        cookie.set_samesite(args.samesite)
    if cookie.samesite == "None" and not cookie.secure:
        logger.warning("SameSite=None without Secure is rejected by browsers; add --secure")
    return cookie


def run_build(args: argparse.Namespace) -> None:
    """Print the Set-Cookie value built from ``args``."""
    try:
        cookie = build_cookie(args)
    except CrumbError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(cookie.to_string())
