"""Build Jinja2 template context from a file descriptor.

The context carries only what the templates print: the source file name,
the resolved Go package and the top-level message types in declaration
order.
"""

from __future__ import annotations

from typing import Any

from google.protobuf.descriptor_pb2 import DescriptorProto, FileDescriptorProto


def _message_context(message: DescriptorProto) -> dict[str, Any]:
    return {"name": message.name}


def build_context(file_desc: FileDescriptorProto, go_package: str) -> dict[str, Any]:
    """Build the template context for one generated file."""
    messages = [_message_context(m) for m in file_desc.message_type]
    return {
        "source": file_desc.name,
        "go_package": go_package,
        "messages": messages,
        "message_count": len(messages),
    }
