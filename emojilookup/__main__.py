# SPDX-License-Identifier: MIT

from . import VERSION, configure_logging, logger
from .index import EmojiIndex, InitializationError, load_index
from .loader import LoaderError
from .utils import get_colors

import argparse
import sys
from typing import List, Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="emojilookup",
        description="Look up emoji by alias or tag and detect emoji sequences",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--dataset",
        help="emoji dataset to load (default: $EMOJILOOKUP_DATASET, then the bundled dataset)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show debug output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    alias = subparsers.add_parser("alias", help="show the emoji for an alias")
    alias.add_argument("alias", help='alias to look up, e.g. "smile" or ":smile:"')

    tag = subparsers.add_parser("tag", help="list the emoji with a tag")
    tag.add_argument("tag", help='tag to look up, e.g. "happy"')

    subparsers.add_parser("tags", help="list every known tag")

    check = subparsers.add_parser("check", help="check if a string is made up of emoji only")
    check.add_argument("text", help="string to check")

    update = subparsers.add_parser("update", help="download the latest emoji dataset")
    update.add_argument("--url", help="URL of the dataset to download")
    update.add_argument(
        "-o",
        "--output",
        help="file to save the dataset to",
        required=True,
    )
    update.add_argument("--no-cache", action="store_true", help="bypass the HTTP cache")

    return parser


def _describe(emoji, colors) -> str:
    lines = [f"{emoji.unicode}  {colors['bold']}{emoji.description or '(no description)'}{colors['reset']}"]
    lines.append(" aliases: " + " ".join(f":{a}:" for a in sorted(emoji.aliases)))
    if emoji.tags:
        lines.append(" tags: " + " ".join(sorted(emoji.tags)))
    lines.append(f" code points: {' '.join(f'U+{cp:04X}' for cp in emoji.code_points)}")
    return "\n".join(lines)


def cmd_alias(index: EmojiIndex, args) -> int:
    emoji = index.get_for_alias(args.alias)
    if emoji is None:
        logger.error(f"No such alias: {args.alias}")
        return 1
    print(_describe(emoji, get_colors()))
    return 0


def cmd_tag(index: EmojiIndex, args) -> int:
    emojis = index.get_for_tag(args.tag)
    if not emojis:
        logger.error(f"No emoji with tag: {args.tag}")
        return 1
    for emoji in sorted(emojis, key=lambda e: e.code_points):
        print(f"{emoji.unicode}  " + " ".join(f":{a}:" for a in sorted(emoji.aliases)))
    return 0


def cmd_tags(index: EmojiIndex, args) -> int:
    for tag in sorted(index.get_all_tags()):
        print(tag)
    return 0


def cmd_check(index: EmojiIndex, args) -> int:
    colors = get_colors()
    if index.is_emoji(args.text):
        print(f"{colors['green']}✓{colors['reset']} emoji")
        return 0
    print(f"{colors['red']}✗{colors['reset']} not emoji")
    return 1


def cmd_update(args) -> int:
    from .request import DATASET_URL, RequestError, fetch_dataset, save_dataset

    url = args.url or DATASET_URL
    colors = get_colors(sys.stderr)
    logger.info(f"Downloading emoji dataset from {colors['bold']}{url}{colors['reset']}...")

    try:
        text, index = fetch_dataset(url, no_cache=args.no_cache)
    except RequestError as e:
        logger.error(f"Could not download dataset: {e}")
        return 1
    except (LoaderError, InitializationError) as e:
        logger.error(f"Downloaded dataset is invalid: {e}")
        return 2

    try:
        save_dataset(text, args.output)
    except (OSError, ValueError) as e:
        logger.error(f"Could not save dataset to {args.output}: {e}")
        return 1

    logger.info(f"Saved {len(index)} emoji to {args.output}")
    return 0


COMMANDS = {
    "alias": cmd_alias,
    "tag": cmd_tag,
    "tags": cmd_tags,
    "check": cmd_check,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "update":
        return cmd_update(args)

    try:
        index = load_index(args.dataset)
    except InitializationError as e:
        logger.error(f"Could not load emoji dataset: {e}")
        return 2

    return COMMANDS[args.command](index, args)


if __name__ == "__main__":
    sys.exit(main())
