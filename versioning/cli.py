#!/usr/bin/env python3
"""
Asset Versioning Command Line Entry Point

Prints a version string (or a versioned asset URL) for one request
scope. Handy for build scripts and templates rendered outside a web
framework.

Usage:
    python -m versioning.cli                        # Fallback timestamp
    python -m versioning.cli --label v2             # "v2"
    python -m versioning.cli --static 1.0.0         # Pinned static version
    python -m versioning.cli --label v3 --pin       # Pin the label as static
    python -m versioning.cli --path /static/app.js  # Versioned URL
    python -m versioning.cli --debug                # Enable debug logging

Environment Variables:
    VERSIONING_STATIC_VERSION  - Static version pinned on every scope
    VERSIONING_QUERY_PARAM     - Query parameter name for URLs
    VERSIONING_DEBUG           - Enable debug mode (true/false)
    VERSIONING_LOG_LEVEL       - Log level when not in debug mode
"""

import argparse
import logging
import sys
from typing import List, Optional

from .assets import versioned_url, write_version
from .config.settings import settings
from .scope import request_scope


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Asset Versioning: print a cache-busting version",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--label",
        type=str,
        default=None,
        help="Version label to resolve",
    )

    parser.add_argument(
        "--static",
        type=str,
        default=settings.STATIC_VERSION or None,
        help="Static version to pin for the scope",
    )

    parser.add_argument(
        "--pin",
        action="store_true",
        help="Pin --label as the static version",
    )

    parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Asset path to print as a versioned URL",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    try:
        # An empty --static means "no static version", not "use settings"
        with request_scope(static_version=args.static or "") as cache:
            if args.path:
                if args.label is not None and args.pin:
                    cache.set_static(args.label)
                print(versioned_url(args.path, cache, label=args.label))
            else:
                write_version(cache, label=args.label, pin_static=args.pin)
                print()
    except Exception as e:
        logger.error(f"Versioning error: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
