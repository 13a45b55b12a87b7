"""
Core code generation components.

Provides the catalog model, loader, validator and the base classes used by
all language generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .errors import (
    CatalogError,
    CatalogIOError,
    CatalogBuildError,
    SchemaParseError,
    SchemaError,
    MissingSectionError,
    MissingFieldError,
    InvalidFieldError,
    InvalidEntryNameError,
    InvalidMessageEntryError,
    ValidationError,
    IdentifierCollisionError,
    InvalidIdentifierError,
    DuplicateNameError,
    DuplicateCodeError,
    StatusOutOfRangeError,
    GeneratorError,
)
from .schema import ErrorCatalog, ErrorEntry, Message, load_catalog
from .naming import IdentifierMapper, to_canonical_identifier
from .validator import validate_catalog
from .config import CompilerConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "CatalogError",
    "CatalogIOError",
    "CatalogBuildError",
    "SchemaParseError",
    "SchemaError",
    "MissingSectionError",
    "MissingFieldError",
    "InvalidFieldError",
    "InvalidEntryNameError",
    "InvalidMessageEntryError",
    "ValidationError",
    "IdentifierCollisionError",
    "InvalidIdentifierError",
    "DuplicateNameError",
    "DuplicateCodeError",
    "StatusOutOfRangeError",
    "GeneratorError",
    # Catalog model and loader
    "ErrorCatalog",
    "ErrorEntry",
    "Message",
    "load_catalog",
    # Naming
    "IdentifierMapper",
    "to_canonical_identifier",
    # Validation
    "validate_catalog",
    # Configuration system
    "CompilerConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
