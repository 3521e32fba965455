"""Read the plugin request and write the plugin response.

protoc writes one serialized CodeGeneratorRequest to the plugin's stdin and
reads one serialized CodeGeneratorResponse from its stdout.
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest, CodeGeneratorResponse


def parse_request(data: bytes) -> CodeGeneratorRequest:
    """Decode request bytes. Raises google.protobuf.message.DecodeError."""
    request = CodeGeneratorRequest()
    request.ParseFromString(data)
    return request


def dump_request(path: str | Path, data: bytes) -> None:
    """Save raw request bytes so the plugin can be replayed without protoc."""
    Path(path).write_bytes(data)


def write_response(stream: BinaryIO, response: CodeGeneratorResponse) -> None:
    """Serialize ``response`` to ``stream``."""
    stream.write(response.SerializeToString())
    stream.flush()
