"""Small CLI for previewing changelogs."""

import argparse
import sys
from pathlib import Path

from whatsnew.common.utils.config import get_config
from whatsnew.common.utils.logger import logger


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(prog="whatsnew", description="What's New changelog renderer")
    subparsers = parser.add_subparsers(dest="action", help="Action to perform")

    render_parser = subparsers.add_parser("render", help="Render a changelog file")
    render_parser.add_argument("--file", required=True, type=Path, help="Changelog file to render")
    render_parser.add_argument("--version", type=str, default=None, help="Version label to display")
    render_parser.add_argument(
        "--format",
        type=str,
        choices=["raw", "markdown", "json", "text"],
        default="text",
        help="Output format: 'raw' for pydantic repr, 'text' for the painted surface",
    )

    subparsers.add_parser("config", help="Print configuration")

    args = parser.parse_args(argv)

    if args.action == "render":
        from whatsnew.surface import open_changelog, paint_text

        path: Path = args.file
        if not path.is_file():
            logger.error(f"Changelog file not found: {path}")
            return 1

        surface = open_changelog(path.read_text(encoding="utf-8-sig"), args.version, lambda: None)
        if surface is None:
            logger.info(f"{path} is empty, nothing to show")
            return 0

        match str(args.format).lower():
            case "raw":
                for block in surface.blocks:
                    print(repr(block))

            case "markdown":
                print(surface.blocks.markdown, end="")

            case "json":
                print(surface.blocks.json)

            case "text":
                print(paint_text(surface), end="")

            case _:
                logger.error(f"Unknown format: {args.format}")
                return 1

    elif args.action == "config":
        for key, value in sorted(get_config().model_dump().items()):
            print(f"{key}={value}")

    else:
        parser.print_help()

    return 0


if __name__ == "__main__":
    sys.exit(main())
