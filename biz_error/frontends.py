"""Front-ends that turn a schema file into usable error codes.

``load_error_codes`` compiles a schema straight into an in-memory module and
``generate_error_codes`` writes the generated module to disk. Both run the
same ``compile_catalog`` transformation.
"""

import sys
import types
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .codegen import CompilerConfig, GenerationResult, compile_catalog
from .codegen.core.errors import CatalogBuildError, CatalogError
from .codegen.registry import get_generator
from .logging_config import get_logger
from .utils import read_schema_text, write_atomic

logger = get_logger(__name__)

ConfigLike = Optional[Union[CompilerConfig, Dict[str, Any], str, Path]]


def build_from_source(
    schema_path: str | Path | None = None,
    url: str | None = None,
    config: ConfigLike = None,
) -> GenerationResult:
    """Read a schema and compile it, wrapping any failure with its source.

    Raises:
        CatalogBuildError: If reading, parsing, validation or emission fails.
    """
    source = str(schema_path or url)
    try:
        source, schema_text = read_schema_text(file_path=schema_path, url=url)
        return compile_catalog(schema_text, config, source=Path(source).name)
    except CatalogError as e:
        logger.error("Failed to build error codes from %s: %s", source, e)
        raise CatalogBuildError(source, e) from e


def load_error_codes(
    schema_path: str | Path,
    module_name: str = "error_codes",
    config: ConfigLike = None,
    register: bool = False,
) -> types.ModuleType:
    """Compile a schema into a module object without writing any file.

    Args:
        schema_path: YAML schema to compile.
        module_name: ``__name__`` of the created module.
        config: Compiler configuration.
        register: Also insert the module into ``sys.modules``.

    Returns:
        Module exposing the error-code enum and ``ALL_CODES``.

    Raises:
        CatalogBuildError: If the schema cannot be compiled or the generated
            module fails to load. A registered module is removed again.
    """
    result = build_from_source(schema_path, config=config)

    module = types.ModuleType(module_name, "Business error codes")
    try:
        code = compile(result.code, f"<error codes from {schema_path}>", "exec")
        if register:
            sys.modules[module_name] = module
        exec(code, module.__dict__)
    except Exception as e:
        if register and sys.modules.get(module_name) is module:
            del sys.modules[module_name]
        logger.error("Generated module for %s failed to load: %s", schema_path, e)
        raise CatalogBuildError(str(schema_path), e) from e

    logger.debug("Loaded %s from %s", module_name, schema_path)
    return module


def generate_error_codes(
    schema_path: str | Path | None,
    output_path: str | Path,
    config: ConfigLike = None,
    url: str | None = None,
) -> GenerationResult:
    """Compile a schema and write the generated module to output_path.

    Nothing is written unless the whole schema compiles; the write itself is
    atomic.

    Args:
        schema_path: YAML schema to compile (or None with url).
        output_path: Destination ``.py`` file.
        config: Compiler configuration.
        url: Fetch the schema from this URL instead of a file.

    Returns:
        GenerationResult of the compilation.

    Raises:
        CatalogBuildError: On any read, parse, validation, emission or write
            failure.
    """
    result = build_from_source(schema_path, url=url, config=config)

    try:
        write_atomic(output_path, result.code)
    except CatalogError as e:
        raise CatalogBuildError(str(schema_path or url), e) from e

    result.metadata["output_file"] = str(output_path)
    return result


def default_output_name(schema_path: str | Path, language: str = "python") -> str:
    """Suggest an output file name for a schema, e.g. biz_errors.py."""
    extension = get_generator(language).file_extension
    return Path(schema_path).stem + extension
