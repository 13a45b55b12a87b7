"""
Python code generator implementation.

Generates a self-contained module holding an ``enum.Enum`` of error codes
whose lookups dispatch through exhaustive ``match`` statements.
"""

from http import HTTPStatus
from pathlib import Path
from typing import Any, Dict, List

from ....logging_config import get_logger
from ...core.config import CompilerConfig
from ...core.errors import GeneratorError
from ...core.generator import CodeGenerator
from ...core.naming import IdentifierMapper
from ...core.schema import ErrorCatalog, ErrorEntry
from ...core.validator import MAX_STATUS, MIN_STATUS
from .naming import create_python_mapper

logger = get_logger(__name__)

TEMPLATE_NAME = "error_codes.py.j2"
TEMPLATE_INDENT = 4


class PythonGenerator(CodeGenerator):
    """Code generator for Python error-code enums."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def create_mapper(self) -> IdentifierMapper:
        """Return a mapper that rejects Python keywords."""
        return create_python_mapper()

    def generate(self, catalog: ErrorCatalog, identifiers: List[str]) -> str:
        """Generate the complete error-code module."""
        if len(identifiers) != len(catalog.entries):
            raise GeneratorError(
                f"Got {len(identifiers)} identifiers for {len(catalog.entries)} entries"
            )

        variants = [
            self._generate_variant_data(entry, identifier, catalog.default_language)
            for entry, identifier in zip(catalog.entries, identifiers)
        ]

        if not variants:
            self._warn("Catalog declares no error codes; generated enum is empty")

        context = {
            "source": self.source,
            "enum_name": self.config.enum_name,
            "all_codes_name": self.config.all_codes_name,
            "default_language": catalog.default_language,
            "add_comments": self.config.add_comments,
            "variants": variants,
        }

        return self.render_template(TEMPLATE_NAME, context)

    def _generate_variant_data(
        self, entry: ErrorEntry, identifier: str, default_language: str
    ) -> Dict[str, Any]:
        """Generate variant data for template."""
        fallback = entry.get_message(default_language)
        if fallback is None:
            self._warn(
                f"Error '{entry.raw_name}' has no '{default_language}' message; "
                f"unmatched languages resolve to an empty message"
            )
            fallback = ""

        return {
            "identifier": identifier,
            "raw_name": entry.raw_name,
            "code": entry.numeric_code,
            "status": self._status_expression(entry),
            "messages": [
                {"language": message.language, "text": message.text}
                for message in entry.messages
            ],
            "fallback": fallback,
            "doc": fallback,
        }

    def _status_expression(self, entry: ErrorEntry) -> str:
        """Get the Python expression for an entry's HTTP status."""
        status = entry.status_code
        if not MIN_STATUS <= status <= MAX_STATUS:
            # The validator rejects these before emission
            raise GeneratorError(
                f"Internal error: status {status} of '{entry.raw_name}' "
                f"passed validation"
            )

        try:
            return f"HTTPStatus.{HTTPStatus(status).name}"
        except ValueError:
            # Valid but unregistered status
            return str(status)

    def _warn(self, message: str):
        logger.warning(message)
        self.warnings.append(message)

    def format_code(self, code: str) -> str:
        """Format code and re-indent to the configured indent size."""
        code = super().format_code(code)
        indent_size = self.config.indent_size
        if indent_size == TEMPLATE_INDENT:
            return code

        lines = []
        for line in code.split("\n"):
            stripped = line.lstrip(" ")
            depth = (len(line) - len(stripped)) // TEMPLATE_INDENT
            lines.append(" " * (depth * indent_size) + stripped)
        return "\n".join(lines)


def create_python_generator(config: CompilerConfig = None, **options) -> PythonGenerator:
    """Create a Python generator, applying keyword overrides to the config."""
    if config is None:
        from ...core.config import load_config

        config = load_config(custom_config=options)

    return PythonGenerator(config)
