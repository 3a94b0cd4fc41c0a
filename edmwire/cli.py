"""
Edm codec command-line interface.

Encode and decode single typed values the way they appear on the wire.

Usage:
    edmwire encode Edm.Int64 5 --query
    edmwire encode Edm.Boolean true
    edmwire decode Edm.DateTime 2012-03-04T05:06:07.0000000Z
    edmwire check Edm.Guid
"""

import argparse
import base64
import json
import logging
import sys
from datetime import datetime
from typing import Any, Optional

from . import __version__
from .edm import (
    EdmType,
    InvalidTypeError,
    process_type,
    serialize_query_value,
    serialize_value,
    unserialize_query_value,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_TYPE = 1
EXIT_ERROR = 2


class NativeValueEncoder(json.JSONEncoder):
    """JSON encoder for decoded native values."""

    def default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return obj.isoformat()
        if isinstance(obj, (bytes, bytearray)):
            return base64.b64encode(bytes(obj)).decode("ascii")
        return super().default(obj)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edmwire",
        description="Encode and decode Edm typed values for table storage",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s encode Edm.Int64 5 --query
    %(prog)s encode Edm.String "O'Brien" --query
    %(prog)s decode Edm.Boolean true --format json
    %(prog)s check Edm.Unknown

Binary values are given and printed base64-encoded.

Exit codes:
    0 - Success
    1 - Invalid Edm type
    2 - Error converting the value
        """,
    )

    parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    encode = commands.add_parser("encode", help="Encode a value for the wire")
    encode.add_argument("type", help="Edm type, e.g. Edm.Int32 (empty for Edm.String)")
    encode.add_argument("value", help="Value, spelled as in a filter response")
    encode.add_argument(
        "--query",
        action="store_true",
        help="Emit a query filter literal instead of body text",
    )

    decode = commands.add_parser("decode", help="Decode filter text to a value")
    decode.add_argument("type", help="Edm type, e.g. Edm.Int32")
    decode.add_argument("text", help="Text to decode")

    check = commands.add_parser("check", help="Resolve and validate an Edm type")
    check.add_argument("type", nargs="?", default=None, help="Edm type (default: Edm.String)")

    return parser


def _encode(edm_type: EdmType, text: str, query: bool) -> str:
    value = unserialize_query_value(edm_type, text)
    if edm_type == EdmType.BINARY and not query:
        # Body text carries binary base64-encoded, as given.
        value = text
    if query:
        return serialize_query_value(edm_type, value)
    return serialize_value(edm_type, value)


def _emit(result: Any, fmt: str, edm_type: EdmType) -> None:
    if fmt == "json":
        print(
            json.dumps(
                {"type": edm_type.value, "value": result},
                cls=NativeValueEncoder,
            )
        )
    else:
        print(result)


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code: 0 on success, 1 for an invalid Edm type, 2 on error
    """
    parsed = _build_parser().parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        edm_type = process_type(parsed.type)

        if parsed.command == "check":
            _emit(edm_type.value, parsed.format, edm_type)
            return EXIT_OK

        if parsed.command == "encode":
            result = _encode(edm_type, parsed.value, parsed.query)
        else:
            decoded = unserialize_query_value(edm_type, parsed.text)
            result = decoded if parsed.format == "json" else repr(decoded)
    except InvalidTypeError as e:
        print(f"Error: {e} ({parsed.type!r})", file=sys.stderr)
        return EXIT_INVALID_TYPE
    except (ValueError, TypeError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    _emit(result, parsed.format, edm_type)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
