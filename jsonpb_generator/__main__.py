"""Entry point: protoc-gen-go-jsonpb, or python -m jsonpb_generator

Reads a CodeGeneratorRequest from stdin, writes a CodeGeneratorResponse to stdout.

Usage:
    protoc --go-jsonpb_out=. --go-jsonpb_opt=gofmt=/usr/local/go/bin/gofmt foo.proto
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

from google.protobuf.message import DecodeError

from .config import PluginConfig, from_env
from .loader import dump_request, parse_request, write_response
from .plugin import generate

logger = logging.getLogger("jsonpb_generator")

USAGE = """\
protoc-gen-go-jsonpb is a protoc plugin, it is not intended for direct use.

Usage:
  protoc --plugin=protoc-gen-go-jsonpb=$(which protoc-gen-go-jsonpb) \\
         --go-jsonpb_out=./gen \\
         your_file.proto
"""


def configure_logging(config: PluginConfig) -> None:
    """Send log records to stderr; stdout carries the response."""
    level = logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("protoc-gen-go-jsonpb: %(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def main(stdin: BinaryIO | None = None, stdout: BinaryIO | None = None) -> int:
    config = from_env()
    configure_logging(config)

    if stdin is None:
        if sys.stdin.isatty():
            print(USAGE, file=sys.stderr, end="")
            return 1
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout.buffer

    data = stdin.read()
    if config.dump_path:
        logger.warning("writing request from protoc to %s", config.dump_path)
        dump_request(config.dump_path, data)

    try:
        request = parse_request(data)
    except DecodeError as exc:
        # No response channel exists yet; nothing is written to stdout.
        logger.critical("cannot decode CodeGeneratorRequest: %s", exc)
        return 1

    write_response(stdout, generate(request, config=config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
