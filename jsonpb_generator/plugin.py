"""Turn a CodeGeneratorRequest into a CodeGeneratorResponse.

For each requested file, in the order protoc lists the descriptors:
resolve the Go package, render the hooks, run the formatter. The first
failure discards everything generated so far and becomes the response
error. A response never carries both files and an error.
"""

from __future__ import annotations

import logging

from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest, CodeGeneratorResponse

from .codegen import synthesize
from .config import PluginConfig, apply_parameter, from_env
from .errors import GenerationError, PackageConflictError
from .formatter import Formatter, formatter_for
from .naming import go_package_name, output_file_name

logger = logging.getLogger(__name__)


def generate_files(
    request: CodeGeneratorRequest,
    formatter: Formatter,
    allow_multiple_packages: bool = False,
) -> list[CodeGeneratorResponse.File]:
    """Generate every requested file or raise on the first failure."""
    requested = set(request.file_to_generate)
    files: list[CodeGeneratorResponse.File] = []
    first_package: tuple[str, str] | None = None

    for file_desc in request.proto_file:
        name = file_desc.name
        # protoc sends dependencies too; only requested files produce output.
        if name not in requested:
            continue

        go_package = go_package_name(file_desc)
        if first_package is None:
            first_package = (name, go_package)
        elif go_package != first_package[1] and not allow_multiple_packages:
            raise PackageConflictError(dict([first_package, (name, go_package)]))

        logger.debug("generating %s (package %s, %d messages)",
                     name, go_package, len(file_desc.message_type))
        source = synthesize(file_desc, go_package)
        content = formatter.format(source, name)
        files.append(CodeGeneratorResponse.File(name=output_file_name(name), content=content))

    return files


def generate(
    request: CodeGeneratorRequest,
    config: PluginConfig | None = None,
    formatter: Formatter | None = None,
) -> CodeGeneratorResponse:
    """Build the response for ``request``.

    ``config`` defaults to the environment; the request's parameter string is
    applied on top of it. ``formatter`` defaults to whatever the config asks for.
    """
    response = CodeGeneratorResponse(
        supported_features=CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL,
    )
    try:
        config = apply_parameter(config or from_env(), request.parameter)
        files = generate_files(
            request,
            formatter or formatter_for(config),
            allow_multiple_packages=config.allow_multiple_packages,
        )
    except GenerationError as exc:
        logger.error("generation failed: %s", exc)
        response.error = str(exc)
        return response

    response.file.extend(files)
    logger.info("generated %d file(s)", len(files))
    return response
