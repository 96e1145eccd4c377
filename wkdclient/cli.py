"""Command line interface for Web Key Directory lookups."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Sequence

from .config import ClientConfig
from .discovery import WKDDiscovery
from .errors import WKDError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="wkd-client",
        description="Look up OpenPGP keys via the Web Key Directory.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging.")
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file.")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds.")

    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)

    lookup = subparsers.add_parser("lookup", help="fetch the key for an email address")
    lookup.add_argument("email", metavar="EMAIL")
    lookup.add_argument(
        "-o", "--output", metavar="FILE", help="write the key to FILE instead of stdout"
    )

    hash_parser = subparsers.add_parser("hash", help="print the WKD hash of addresses")
    hash_parser.add_argument("emails", metavar="EMAIL", nargs="+")

    urls = subparsers.add_parser("urls", help="print the advanced and direct URLs")
    urls.add_argument("email", metavar="EMAIL")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _load_config(args: argparse.Namespace) -> ClientConfig:
    config = ClientConfig.load(args.config) if args.config else ClientConfig()
    if args.timeout is not None:
        if args.timeout <= 0:
            raise ValueError("timeout must be positive")
        config.timeout = args.timeout
    return config


def _run_lookup(config: ClientConfig, email: str, output: Optional[str]) -> int:
    key = asyncio.run(config.create_resolver().lookup(email))
    if output:
        with open(output, "wb") as f:
            f.write(key)
        print(f"Saved {len(key)} bytes to {output}", file=sys.stderr)
    else:
        sys.stdout.buffer.write(key)
        sys.stdout.buffer.flush()
    return 0


def _print_hashes(emails: List[str]) -> int:
    for email in emails:
        local_part, _ = WKDDiscovery.parse_email(email)
        print(f"{WKDDiscovery.hash_local_part(local_part)} {email}")
    return 0


def _print_urls(email: str) -> int:
    urls = WKDDiscovery.build_urls(email)
    print(f"Advanced: {urls.advanced}")
    print(f"Direct:   {urls.direct}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return a process exit code."""
    args = parse_args(argv)
    try:
        config = _load_config(args)
    except (OSError, ValueError, TypeError) as exc:
        print(f"wkd-client: invalid configuration: {exc}", file=sys.stderr)
        return 2
    config.setup_logging(args.verbose)

    try:
        if args.command == "lookup":
            return _run_lookup(config, args.email, args.output)
        if args.command == "hash":
            return _print_hashes(args.emails)
        return _print_urls(args.email)
    except WKDError as exc:
        print(f"wkd-client: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("Lookup failed", exc_info=True)
        print(f"wkd-client: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
