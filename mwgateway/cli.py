#!/usr/bin/env python3
"""
Command line front end for mwgateway.

Usage:
    mwgateway to-uri "Help:Getting there & away"   # Help:Getting_there_%26_away
    mwgateway to-wiki "getting_there_%26_away"     # Getting there & away
    mwgateway base "User:John/Sandbox/Draft"       # User:John
    mwgateway parent "User:John/Sandbox/Draft"     # User:John/Sandbox
    mwgateway subpage "User:John/Sandbox/Draft"    # Draft
    mwgateway --url https://wiki.example.com url "Main Page"
    echo "Hello" | mwgateway --config config.json create -a Sandbox -s "test"

`create` prints the prepared edit request instead of sending it.
"""

import argparse
import sys
from typing import Optional

from mwgateway import __version__
from mwgateway.config import ConfigError, load_config
from mwgateway.gateway import WikiGateway
from mwgateway.logging_config import setup_logging
from mwgateway.utils import (
    get_base_name,
    get_path_to_subpage,
    get_subpage,
    uri_to_wiki,
    wiki_to_uri,
)

TRANSCODERS = {
    "base": (get_base_name, "Print the base page of a title"),
    "parent": (get_path_to_subpage, "Print the path leading up to the subpage"),
    "subpage": (get_subpage, "Print the subpage name of a title"),
    "to-uri": (wiki_to_uri, "Convert a Wiki form title to URL form"),
    "to-wiki": (uri_to_wiki, "Convert a URL form title to Wiki form"),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mwgateway", description="MediaWiki page title tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="JSON config file (default: MW_CONFIG env var)")
    parser.add_argument("--url", help="Wiki root URL (overrides config)")
    parser.add_argument("--log-dir", help="Write a log file to this directory")
    parser.add_argument("--log-level", help="Log level name (default: INFO)")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    for name, (_, help_text) in TRANSCODERS.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("title")

    url = commands.add_parser("url", help="Print the page URL for a title")
    url.add_argument("title")

    create = commands.add_parser("create", help="Prepare a page creation from stdin")
    create.add_argument("-a", "--article", help="Name of the article to create")
    create.add_argument("-s", "--summary", help="Edit summary")
    create.add_argument("--overwrite", action="store_true", help="Replace the page if it exists")

    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command in TRANSCODERS:
        func = TRANSCODERS[args.command][0]
        result = func(args.title)
        if result is None:
            return 1
        print(result)
        return 0

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.url:
        config["url"] = args.url
    if args.log_dir:
        config["log_dir"] = args.log_dir
    if args.log_level:
        config["log_level"] = args.log_level

    try:
        logger = setup_logging(
            name="mwgateway",
            wiki_id=(config["wiki_name"] or "wiki").lower().replace(" ", "-"),
            log_dir=config["log_dir"],
            level=config["log_level"],
            log_file=bool(config["log_dir"]),
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        gateway = WikiGateway.from_config(config, logger=logger)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.command == "url":
        print(gateway.page_url(args.title))
        return 0

    article = args.article or config["article"]
    if not article:
        parser.error("Name of article is mandatory.")

    content = sys.stdin.read()
    request = gateway.create_request(
        article,
        content,
        summary=args.summary or config["summary"],
        overwrite=args.overwrite,
    )
    logger.info(f"Prepared creation of {article} ({len(content)} chars)")
    print(f"{request.method} {request.url}")
    print(request.body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
