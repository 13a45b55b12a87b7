"""
Base generator interface for all code generation targets.

Defines the contract that all catalog emitters must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import CompilerConfig
from .errors import GeneratorError
from .naming import IdentifierMapper
from .schema import ErrorCatalog
from .templates import TemplateEngine, create_template_engine
from .validator import validate_catalog

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all catalog emitters."""

    def __init__(self, config: Optional[CompilerConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or CompilerConfig()
        self.source: Optional[str] = self.config.language_config.get("source")
        self.warnings: List[str] = []
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.py')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def create_mapper(self) -> IdentifierMapper:
        """Return the identifier mapper for the target language."""
        return IdentifierMapper()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, catalog: ErrorCatalog, identifiers: List[str]) -> str:
        """
        Generate code for a validated catalog.

        Args:
            catalog: Validated catalog
            identifiers: Canonical identifiers, one per entry, in order

        Returns:
            Generated code as a string
        """
        pass

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code ending in exactly one newline
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}


def generate_code(generator: CodeGenerator, catalog: ErrorCatalog) -> GenerationResult:
    """
    Validate a catalog and generate code with the specified generator.

    Args:
        generator: Code generator instance
        catalog: Loaded catalog

    Returns:
        GenerationResult with code, warnings, and metadata

    Raises:
        SchemaError, ValidationError: If the catalog is invalid
        GeneratorError: If emission fails
    """
    identifiers = validate_catalog(catalog, generator.config, generator.create_mapper())

    generator.warnings = []
    code = generator.generate(catalog, identifiers)
    if not code:
        raise GeneratorError(f"{generator.language_name} generator produced no code")

    formatted_code = generator.format_code(code)
    if generator.config.line_ending != "\n":
        formatted_code = formatted_code.replace("\n", generator.config.line_ending)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "entry_count": len(catalog.entries),
        "default_language": catalog.default_language,
        "languages": catalog.languages,
        "enum_name": generator.config.enum_name,
    }

    logger.debug(
        "Generated %s code for %d entries", generator.language_name, len(identifiers)
    )
    return GenerationResult(formatted_code, list(generator.warnings), metadata)
