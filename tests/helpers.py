"""Descriptor builders and formatter doubles shared by the tests.

Descriptors are built with descriptor_pb2 directly, the same shape protoc
sends. The formatter doubles keep orchestrator tests independent of a Go
toolchain.
"""

from __future__ import annotations

import shutil
from typing import Iterable

import pytest
from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from jsonpb_generator.errors import FormatError

GOFMT = shutil.which("gofmt")

requires_gofmt = pytest.mark.skipif(GOFMT is None, reason="gofmt not on PATH")


def make_file(
    name: str,
    package: str | None = None,
    go_package: str | None = None,
    messages: Iterable[str] = (),
) -> FileDescriptorProto:
    """Build a FileDescriptorProto with top-level messages named ``messages``."""
    file_desc = FileDescriptorProto(name=name)
    if package is not None:
        file_desc.package = package
    if go_package is not None:
        file_desc.options.go_package = go_package
    for message in messages:
        file_desc.message_type.add(name=message)
    return file_desc


def make_request(
    proto_files: Iterable[FileDescriptorProto],
    file_to_generate: Iterable[str],
    parameter: str = "",
) -> CodeGeneratorRequest:
    request = CodeGeneratorRequest(
        file_to_generate=list(file_to_generate),
        proto_file=list(proto_files),
    )
    if parameter:
        request.parameter = parameter
    return request


class RecordingFormatter:
    """Return source unchanged and remember which files were formatted."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def format(self, source: str, name: str) -> str:
        self.calls.append(name)
        return source


class FailingFormatter(RecordingFormatter):
    """Reject one named file, pass the rest through."""

    def __init__(self, fail_on: str) -> None:
        super().__init__()
        self.fail_on = fail_on

    def format(self, source: str, name: str) -> str:
        super().format(source, name)
        if name == self.fail_on:
            raise FormatError(f"{name}: 4:9: expected 'IDENT', found 'func'", source)
        return source
