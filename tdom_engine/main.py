#!/usr/bin/env python3
"""
TDom Engine - demo entry point

Prints one of the bundled example documents as HTML or JSON.
"""

import argparse
import logging
import sys

from tdom_engine import __version__
from tdom_engine.examples import hello_world, rendering_example
from tdom_engine.utils.logging import log_exception, set_console_level

logger = logging.getLogger(__name__)

EXAMPLES = {
    "hello": hello_world.build_page,
    "vcard": rendering_example.build_page,
}


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Render a TDom Engine example document")

    parser.add_argument("example", nargs="?", choices=sorted(EXAMPLES), default="hello",
                        help="Example document to render")
    parser.add_argument("--format", choices=("html", "json"), default="html", help="Output format")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"TDom Engine {__version__}")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)

    if args.debug:
        set_console_level("DEBUG")

    try:
        page = EXAMPLES[args.example]()
        if args.format == "json":
            sys.stdout.write(page.to_json(indent=2))
        else:
            page.dump(sys.stdout)
        sys.stdout.write("\n")
    except Exception as e:
        log_exception(logger, e, f"Failed to render example {args.example!r}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
