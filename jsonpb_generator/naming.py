"""Derive Go package names and output paths from file descriptors.

Package name, first match wins:
  - option go_package          -> text after the last ';', else after the last '/'
  - package                    -> used verbatim
  - neither                    -> file base name without extension

The result is then sanitized: every '.' and '-' becomes '_'.

Examples:
  go_package = "example.com/foo/bar;mypkg"  -> mypkg
  go_package = "example.com/foo/bar"        -> bar
  go_package = "github.com/x/go-lib"        -> go_lib
  package    = "foo.bar"                    -> foo_bar
  name       = "protos/my-file.proto"       -> my_file

Output path:
  a/b/name.proto -> a/b/name.pb.jsonpb.go
"""

from __future__ import annotations

import posixpath
import re

from google.protobuf.descriptor_pb2 import FileDescriptorProto

OUTPUT_SUFFIX = ".pb.jsonpb.go"


def sanitize_package_name(name: str) -> str:
    """Replace characters Go does not allow in a package name."""
    return re.sub(r"[.\-]", "_", name)


def _go_package_identity(go_package: str) -> str:
    """Pick the package name out of a go_package option value."""
    if ";" in go_package:
        return go_package.rsplit(";", 1)[1]
    return go_package.rsplit("/", 1)[-1]


def _strip_extension(path: str) -> str:
    root, _ext = posixpath.splitext(path)
    return root


def package_identity_name(file_desc: FileDescriptorProto) -> str:
    """Return the unsanitized package identity of a file."""
    if file_desc.options.HasField("go_package"):
        return _go_package_identity(file_desc.options.go_package)
    if file_desc.HasField("package"):
        return file_desc.package
    return _strip_extension(posixpath.basename(file_desc.name))


def go_package_name(file_desc: FileDescriptorProto) -> str:
    """Return the Go package name generated code for ``file_desc`` lives in."""
    return sanitize_package_name(package_identity_name(file_desc))


def output_file_name(proto_name: str) -> str:
    """Map ``a/b/name.proto`` to ``a/b/name.pb.jsonpb.go``."""
    return _strip_extension(proto_name) + OUTPUT_SUFFIX
