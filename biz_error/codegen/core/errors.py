"""
Exception hierarchy for error-catalog compilation.

Every failure raised while loading, validating or emitting a catalog derives
from CatalogError, so front-ends can catch a single type and still report the
precise rule that was violated.
"""

from typing import Any, Optional


class CatalogError(Exception):
    """Base exception for all error-catalog compilation failures."""

    pass


class CatalogIOError(CatalogError):
    """Schema could not be read or generated output could not be written."""

    pass


class SchemaParseError(CatalogError):
    """Schema text is not a well-formed YAML document."""

    def __init__(
        self, message: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        self.line = line
        self.column = column
        location = ""
        if line is not None:
            location = f" (line {line}"
            if column is not None:
                location += f", column {column}"
            location += ")"
        super().__init__(f"Failed to parse YAML{location}: {message}")


# Structural errors


class SchemaError(CatalogError):
    """Document parsed but is missing required sections or fields."""

    pass


class MissingSectionError(SchemaError):
    def __init__(self, section: str):
        self.section = section
        super().__init__(f"Missing '{section}' section in schema")


class MissingFieldError(SchemaError):
    def __init__(self, name: str, field: str):
        self.name = name
        self.field = field
        super().__init__(f"Error '{name}': missing '{field}' field")


class InvalidFieldError(SchemaError):
    def __init__(self, name: str, field: str, expected: str, value: Any = None):
        self.name = name
        self.field = field
        self.expected = expected
        self.value = value
        super().__init__(
            f"Error '{name}': field '{field}' must be {expected}, got {value!r}"
        )


class InvalidEntryNameError(SchemaError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Error key must be a string, got {key!r}")


class InvalidMessageEntryError(SchemaError):
    def __init__(self, name: str, language: Any):
        self.name = name
        self.language = language
        super().__init__(
            f"Error '{name}': message entry {language!r} must map a string "
            f"language tag to a string"
        )


# Semantic errors


class ValidationError(CatalogError):
    """Catalog is structurally complete but violates a cross-entry rule."""

    pass


class IdentifierCollisionError(ValidationError):
    def __init__(self, identifier: str, first_name: str, second_name: str):
        self.identifier = identifier
        self.names = (first_name, second_name)
        super().__init__(
            f"Errors '{first_name}' and '{second_name}' both map to "
            f"identifier '{identifier}'"
        )


class InvalidIdentifierError(ValidationError):
    def __init__(self, name: str, identifier: str):
        self.name = name
        self.identifier = identifier
        super().__init__(
            f"Error '{name}' maps to '{identifier}', which is not a usable "
            f"enum member name"
        )


class DuplicateNameError(ValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Error '{name}' is declared more than once")


class DuplicateCodeError(ValidationError):
    def __init__(self, code: int, first_name: str, second_name: str):
        self.code = code
        self.names = (first_name, second_name)
        super().__init__(
            f"Errors '{first_name}' and '{second_name}' share numeric code {code}"
        )


class StatusOutOfRangeError(ValidationError):
    def __init__(self, name: str, status: int):
        self.name = name
        self.status = status
        super().__init__(
            f"Error '{name}': http_status {status} is outside the valid range 100-599"
        )


class GeneratorError(CatalogError):
    """Base exception for code emission errors."""

    pass


class CatalogBuildError(CatalogError):
    """A front-end failed to build the catalog from a schema source."""

    def __init__(self, schema_path: str, cause: Exception):
        self.schema_path = schema_path
        self.cause = cause
        super().__init__(
            f"Failed to generate error codes from '{schema_path}': {cause}"
        )
