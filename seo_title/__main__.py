"""CLI entrypoint for seo_title."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from seo_title.composer import TitleComposer
from seo_title.errors import TitleError
from seo_title.logging_config import setup_logging
from seo_title.models import TitleResult

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    setup_logging()

    parser = argparse.ArgumentParser(prog="seo-title")
    sub = parser.add_subparsers(dest="command", required=True)

    compose_parser = sub.add_parser("compose")
    compose_parser.add_argument("--field", action="append", default=[], metavar="NAME=TEXT")
    compose_parser.add_argument("--priority", action="append", default=[], metavar="SPEC")
    compose_parser.add_argument("--max", type=int, dest="max_length")
    compose_parser.add_argument("--punctuation", nargs="+")
    compose_parser.add_argument("--bytes", action="store_true", help="count UTF-8 bytes")
    compose_parser.add_argument("--lenient", action="store_true", help="skip specs with unknown fields")
    compose_parser.add_argument("--explain", action="store_true")

    payload_parser = sub.add_parser("payload")
    payload_parser.add_argument("path", help="JSON file with 'data' and 'config' keys, or - for stdin")
    payload_parser.add_argument("--explain", action="store_true")

    args = parser.parse_args(argv)

    try:
        if args.command == "compose":
            composer = TitleComposer(_parse_fields(args.field), _compose_config(args))
        else:
            try:
                payload = _read_payload(args.path)
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Cannot read payload '%s': %s", args.path, e)
                return 2
            composer = TitleComposer.from_payload(payload)
        result = composer.generate()
    except TitleError as e:
        logger.error("%s", e)
        return 2

    _print_result(result, args.explain)
    return 0


def _parse_fields(items: list[str]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for item in items:
        name, sep, text = item.partition("=")
        if not sep:
            raise SystemExit(f"--field expects NAME=TEXT, got '{item}'")
        fields[name.strip()] = text
    return fields


def _compose_config(args: argparse.Namespace) -> dict:
    config: dict = {"priority": args.priority}
    if args.max_length is not None:
        config["max"] = args.max_length
    if args.punctuation:
        config["punctuation"] = args.punctuation
    if args.bytes:
        config["length_unit"] = "bytes"
    if args.lenient:
        config["strict"] = False
    return config


def _read_payload(path: str) -> dict:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _print_result(result: TitleResult, explain: bool) -> None:
    if not explain:
        print(result.title)
        return
    print(json.dumps(result.model_dump(mode="json"), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    sys.exit(main())
