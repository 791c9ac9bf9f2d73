import argparse
import json
import sys
from typing import Optional, Sequence

from bindb.config import DecoderSettings
from bindb.core.errors import DecodeError
from bindb.logging import create_logger
from bindb.parsing.database import parse_binary_database, parse_binary_database_b64


def _read_input(path: str, as_text: bool):
    if path == "-":
        return sys.stdin.read() if as_text else sys.stdin.buffer.read()
    mode = "r" if as_text else "rb"
    with open(path, mode) as f:
        return f.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Decode a binary database and print it as JSON.")
    parser.add_argument("path", nargs="?", default="-", help="Input file, or '-' for stdin.")
    parser.add_argument("--b64", action="store_true", help="Input is base64 text rather than raw bytes.")
    parser.add_argument("--indent", type=int, default=None, help="JSON indentation.")
    parser.add_argument("--encoding", type=str, default=None, help="Codec for text payloads.")
    parser.add_argument("--strict-booleans", action="store_true", help="Reject boolean bytes other than 0 and 1.")
    args = parser.parse_args(argv)

    overrides = {}
    if args.encoding:
        overrides["text_encoding"] = args.encoding
    if args.strict_booleans:
        overrides["strict_booleans"] = True
    settings = DecoderSettings(**overrides)
    create_logger("bindb", settings.log_ring_size, settings.log_level.upper())

    try:
        data = _read_input(args.path, args.b64)
    except OSError as exc:
        print(f"bindb: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1

    try:
        if args.b64:
            db = parse_binary_database_b64(data, settings)
        else:
            db = parse_binary_database(data, settings)
    except DecodeError as exc:
        print(f"bindb: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(db.as_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
