"""
Error-catalog code generation module.

Loads a YAML error schema, validates it and emits typed error-code source.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .registry import GeneratorRegistry, RegistryError, get_generator, list_supported_languages
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import ErrorCatalog, ErrorEntry, Message, load_catalog
from .core.validator import validate_catalog
from .core.config import CompilerConfig, ConfigManager, ConfigError, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)


def compile_catalog(
    schema_text: str,
    config: Optional[Union[CompilerConfig, Dict[str, Any], str, Path]] = None,
    language: str = "python",
    source: Optional[str] = None,
) -> GenerationResult:
    """
    Compile schema text into generated source.

    This is the single transformation shared by every front-end.

    Args:
        schema_text: YAML schema contents
        config: Compiler configuration, dict of overrides, or config file path
        language: Target language name
        source: Schema name recorded in the generated header

    Returns:
        GenerationResult with the complete generated code

    Raises:
        CatalogError: On the first parse, schema, validation or emission error
    """
    generator = get_generator(language, config)
    if source is not None:
        generator.source = source

    catalog = load_catalog(schema_text)
    result = generate_code(generator, catalog)

    logger.info(
        "Compiled %d error codes%s",
        result.metadata["entry_count"],
        f" from {source}" if source else "",
    )
    return result


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "ErrorCatalog",
    "ErrorEntry",
    "Message",
    "CompilerConfig",
    "ConfigManager",
    "ConfigError",
    "compile_catalog",
    "generate_code",
    "get_generator",
    "list_supported_languages",
    "load_catalog",
    "load_config",
    "validate_catalog",
]
