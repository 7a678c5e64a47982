"""``crumb parse``: show how a Set-Cookie value is understood.

Prints the canonical serialization followed by one line per field.
Exits with code 1 if the cookie-pair is malformed.
"""

import argparse
import json
import sys

from crumb.cookie import Cookie
from crumb.errors import MalformedCookie


def describe(cookie: Cookie) -> dict[str, object]:
    """Fields of *cookie* as a JSON-ready dict, attributes in buffer order."""
    attributes: dict[str, object] = {}
    for kind, value in cookie.attributes:
        attributes[kind.value] = True if value is None else value
    return {
        "name": cookie.name,
        "value": cookie.value,
        "attributes": attributes,
        "set_cookie": cookie.to_string(),
    }


def run_parse(args: argparse.Namespace) -> None:
    """Parse ``args.raw`` and print its fields."""
    try:
        cookie = Cookie.parse(args.raw)
    except MalformedCookie as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(json.dumps(describe(cookie), indent=2))
        return

    print(cookie.to_string())
    rows = [("name", cookie.name), ("value", cookie.value)]
    rows.extend((kind.value, "(flag)" if value is None else value) for kind, value in cookie.attributes)
    width = max(len(label) for label, _ in rows)
    for label, text in rows:
        print(f"  {label:<{width}}  {text}")
