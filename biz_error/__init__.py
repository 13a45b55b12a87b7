"""
biz-error: compile a YAML error catalog into typed Python error codes.

Quick start:
    from biz_error import load_error_codes, AppError

    codes = load_error_codes("biz_errors.yaml")
    raise AppError(codes.ErrorCode.InvalidParam).with_data({"field": "user_id"})
"""

__version__ = "0.1.0"

from .app_error import AppError, ErrorCodeLike, ErrorResponse
from .codegen import (
    CompilerConfig,
    ConfigError,
    GenerationResult,
    compile_catalog,
    load_config,
)
from .codegen.core.errors import (
    CatalogBuildError,
    CatalogError,
    CatalogIOError,
    GeneratorError,
    SchemaError,
    SchemaParseError,
    ValidationError,
)
from .frontends import generate_error_codes, load_error_codes

__all__ = [
    "__version__",
    # Front-ends
    "compile_catalog",
    "load_error_codes",
    "generate_error_codes",
    "GenerationResult",
    # Response wrapper
    "AppError",
    "ErrorCodeLike",
    "ErrorResponse",
    # Configuration
    "CompilerConfig",
    "ConfigError",
    "load_config",
    # Errors
    "CatalogError",
    "CatalogIOError",
    "CatalogBuildError",
    "SchemaParseError",
    "SchemaError",
    "ValidationError",
    "GeneratorError",
]
