"""Crumb CLI: inspect and build ``Set-Cookie`` values.

Entry point registered as ``crumb`` in ``pyproject.toml``::

    [project.scripts]
    crumb = "crumb.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``crumb`` command."""
    parser = argparse.ArgumentParser(
        prog="crumb",
        description="crumb: RFC 6265 Set-Cookie values backed by a single string.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log ignored attributes and other details",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- crumb parse ------------------------------------------------------
    parse_parser = subparsers.add_parser("parse", help="Parse a Set-Cookie value")
    parse_parser.add_argument("raw", help='Set-Cookie value (e.g. "id=42; Secure; Path=/")')
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print fields as a JSON object",
    )

    # -- crumb build ------------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a Set-Cookie value")
    build_parser.add_argument("name", help="Cookie name")
    build_parser.add_argument("value", help="Cookie value")
    build_parser.add_argument(
        "--defaults",
        action="store_true",
        help="Start from the CookieConfig defaults (Path=/; HttpOnly; SameSite=Lax)",
    )
    build_parser.add_argument("--max-age", type=int, default=None, help="Max-Age in seconds")
    build_parser.add_argument("--expires", default=None, help="Expires as an HTTP date")
    build_parser.add_argument("--domain", default=None, help="Domain attribute")
    build_parser.add_argument("--path", default=None, help="Path attribute")
    build_parser.add_argument("--secure", action="store_true", help="Add the Secure flag")
    build_parser.add_argument("--httponly", action="store_true", help="Add the HttpOnly flag")
    build_parser.add_argument(
        "--samesite",
        choices=("Strict", "Lax", "None"),
        default=None,
        help="SameSite attribute",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "parse":
        from crumb.cli._parse import run_parse

        run_parse(args)
    elif args.command == "build":
        from crumb.cli._build import run_build

        run_build(args)
