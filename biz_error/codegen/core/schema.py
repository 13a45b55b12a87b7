"""
Core schema representation for error-catalog compilation.

Parses the YAML error schema into a normalized, immutable catalog that the
validator and generators work with consistently.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ...logging_config import get_logger
from .errors import (
    InvalidEntryNameError,
    InvalidFieldError,
    InvalidMessageEntryError,
    MissingFieldError,
    MissingSectionError,
    SchemaParseError,
)

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_STATUS = 500


@dataclass(frozen=True)
class Message:
    """A human-readable message in one language."""

    language: str
    text: str


@dataclass(frozen=True)
class ErrorEntry:
    """A single named error definition."""

    raw_name: str  # Schema key, e.g. "not_found"
    numeric_code: Optional[int]
    status_code: int = DEFAULT_STATUS
    messages: Tuple[Message, ...] = field(default_factory=tuple)

    @property
    def languages(self) -> List[str]:
        """Language tags in declaration order."""
        return [message.language for message in self.messages]

    def get_message(self, language: str) -> Optional[str]:
        """Get the text for a language, or None if not declared."""
        for message in self.messages:
            if message.language == language:
                return message.text
        return None


@dataclass(frozen=True)
class ErrorCatalog:
    """The full set of declared error entries plus the default language."""

    default_language: str = DEFAULT_LANGUAGE
    entries: Tuple[ErrorEntry, ...] = field(default_factory=tuple)

    def get_entry(self, raw_name: str) -> Optional[ErrorEntry]:
        """Get the first entry declared under a raw name."""
        for entry in self.entries:
            if entry.raw_name == raw_name:
                return entry
        return None

    @property
    def languages(self) -> List[str]:
        """All language tags used by any entry, in first-seen order."""
        seen: Dict[str, None] = {}
        for entry in self.entries:
            for language in entry.languages:
                seen.setdefault(language, None)
        return list(seen)


class _PairedMapping(dict):
    """dict that also remembers every key/value pair, duplicates included."""

    def __init__(self, pairs: List[Tuple[Any, Any]]):
        super().__init__(pairs)
        self.pairs = pairs


class _CatalogYAMLLoader(yaml.SafeLoader):
    """Safe loader that keeps duplicate mapping keys visible."""

    pass


def _construct_paired_mapping(loader: _CatalogYAMLLoader, node: yaml.MappingNode):
    loader.flatten_mapping(node)
    pairs = []
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        if not isinstance(key, Hashable):
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                "found unhashable key",
                key_node.start_mark,
            )
        value = loader.construct_object(value_node, deep=True)
        pairs.append((key, value))
    return _PairedMapping(pairs)


_CatalogYAMLLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_paired_mapping
)


def parse_document(schema_text: str) -> Any:
    """Parse schema text into a generic YAML document."""
    try:
        return yaml.load(schema_text, Loader=_CatalogYAMLLoader)
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            raise SchemaParseError(
                getattr(e, "problem", None) or str(e), mark.line + 1, mark.column + 1
            ) from e
        raise SchemaParseError(str(e)) from e


def _pairs(mapping: Dict[Any, Any]) -> List[Tuple[Any, Any]]:
    if isinstance(mapping, _PairedMapping):
        return mapping.pairs
    return list(mapping.items())


def _is_integer(value: Any) -> bool:
    # YAML booleans load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _convert_entry(name: Any, body: Any) -> ErrorEntry:
    if not isinstance(name, str):
        raise InvalidEntryNameError(name)

    if not isinstance(body, dict) or body.get("code") is None:
        raise MissingFieldError(name, "code")

    code = body["code"]
    if not _is_integer(code):
        raise InvalidFieldError(name, "code", "an integer", code)

    status = body.get("http_status")
    if status is None:
        status = DEFAULT_STATUS
    elif not _is_integer(status):
        raise InvalidFieldError(name, "http_status", "an integer", status)

    raw_messages = body.get("message")
    if not isinstance(raw_messages, dict):
        raise MissingFieldError(name, "message")

    messages = []
    for language, text in _pairs(raw_messages):
        if not isinstance(language, str) or not isinstance(text, str):
            raise InvalidMessageEntryError(name, language)
        messages.append(Message(language=language, text=text))

    return ErrorEntry(
        raw_name=name,
        numeric_code=code,
        status_code=status,
        messages=tuple(messages),
    )


def convert_document(document: Any) -> ErrorCatalog:
    """
    Convert a parsed YAML document to the internal ErrorCatalog.

    Args:
        document: Output of parse_document()

    Returns:
        ErrorCatalog with entries in declaration order
    """
    if not isinstance(document, dict):
        raise MissingSectionError("errors")

    errors = document.get("errors")
    if not isinstance(errors, dict):
        raise MissingSectionError("errors")

    default_language = document.get("default_language", DEFAULT_LANGUAGE)
    if not isinstance(default_language, str):
        logger.warning(
            "default_language %r is not a string; using %r",
            default_language,
            DEFAULT_LANGUAGE,
        )
        default_language = DEFAULT_LANGUAGE

    entries = tuple(_convert_entry(name, body) for name, body in _pairs(errors))
    logger.debug(
        "Loaded %d error entries (default language %s)",
        len(entries),
        default_language,
    )
    return ErrorCatalog(default_language=default_language, entries=entries)


def load_catalog(schema_text: str) -> ErrorCatalog:
    """
    Load an error catalog from raw schema text.

    Args:
        schema_text: YAML schema contents

    Returns:
        ErrorCatalog

    Raises:
        SchemaParseError: If the text is not valid YAML
        SchemaError: If required sections or fields are missing
    """
    return convert_document(parse_document(schema_text))
