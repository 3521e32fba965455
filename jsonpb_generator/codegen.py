"""Render the Go source text for one file.

The header template is rendered once, then the hook template once per
message, in the order the messages appear in the context.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2
from google.protobuf.descriptor_pb2 import FileDescriptorProto

from .context_builder import build_context
from .errors import SynthesisError

TEMPLATE_DIR = Path(__file__).parent / "templates"
HEADER_TEMPLATE = "header.go.j2"
MESSAGE_TEMPLATE = "message.go.j2"

_env: jinja2.Environment | None = None


def get_environment() -> jinja2.Environment:
    """Return the shared template environment, creating it on first use.

    The environment is never modified after creation.
    """
    global _env
    if _env is None:
        _env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=jinja2.StrictUndefined,
            autoescape=False,
        )
    return _env


def render_source(context: dict[str, Any]) -> str:
    """Render header plus one MarshalJSON/UnmarshalJSON pair per message."""
    env = get_environment()
    try:
        parts = [env.get_template(HEADER_TEMPLATE).render(**context)]
        message_template = env.get_template(MESSAGE_TEMPLATE)
        for message in context["messages"]:
            parts.append(message_template.render(message=message))
    except (jinja2.TemplateError, KeyError) as exc:
        raise SynthesisError(f"{context.get('source', '<unknown>')}: {exc}") from exc
    return "".join(parts)


def synthesize(file_desc: FileDescriptorProto, go_package: str) -> str:
    """Produce unformatted Go source for ``file_desc``."""
    return render_source(build_context(file_desc, go_package))
