import argparse
import hashlib
import logging
import sys
from typing import List, Optional

from linux_fingerprint import __version__
from linux_fingerprint.config import settings
from linux_fingerprint.hardware_fingerprint import get_snapshot, serialize_snapshot

FORMATS = ("json", "compact", "sha256")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linux-fingerprint",
        description="Collect a machine identity snapshot of this Linux host.",
    )
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="json",
        help="json (indented, default), compact (single line) or sha256 (digest of the json output)",
    )
    parser.add_argument(
        "-o", "--output",
        metavar="FILE",
        help="Write the result to FILE instead of stdout",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log probe details to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser

def render(snapshot, output_format: str) -> bytes:
    if output_format == "compact":
        return serialize_snapshot(snapshot, indent=None)
    payload = serialize_snapshot(snapshot)
    if output_format == "sha256":
        return (hashlib.sha256(payload).hexdigest() + "\n").encode("ascii")
    return payload

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    snapshot = get_snapshot()

    try:
        payload = render(snapshot, args.format)
        if args.output:
            with open(args.output, "wb") as f:
                f.write(payload)
        else:
            sys.stdout.buffer.write(payload)
            sys.stdout.flush()
    except (TypeError, ValueError, OSError) as e:
        print(f"encode error: {e}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
