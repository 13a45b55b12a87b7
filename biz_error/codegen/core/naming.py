"""
Naming utilities for safe code generation.

Derives canonical type-safe identifiers from raw schema keys and detects
collisions between them. Unlike a general sanitizer, nothing is ever renamed
to dodge a conflict: a collision is a validation failure.
"""

import unicodedata
from typing import Dict, Iterable, List, Set

from ...logging_config import get_logger
from .errors import IdentifierCollisionError, InvalidIdentifierError

logger = get_logger(__name__)

WORD_SEPARATOR = "_"


def normalize_identifier(identifier: str) -> str:
    """Return the NFKC form Python uses when it compiles an identifier."""
    return unicodedata.normalize("NFKC", identifier)


def to_canonical_identifier(raw_name: str, separator: str = WORD_SEPARATOR) -> str:
    """
    Convert a raw schema key to PascalCase.

    The first character of every token is upper-cased and the rest of the
    token is kept as written, so ``invalid_param`` and ``invalidParam`` both
    become ``InvalidParam``.

    Args:
        raw_name: Schema key, e.g. ``not_found``
        separator: Word-boundary character

    Returns:
        Canonical identifier
    """
    return "".join(
        token[0].upper() + token[1:] for token in raw_name.split(separator) if token
    )


class IdentifierMapper:
    """Maps error entries to canonical identifiers, rejecting collisions."""

    def __init__(self, reserved_words: Set[str] = None):
        """
        Initialize identifier mapper.

        Args:
            reserved_words: Words that cannot be used as identifiers in the
                target language
        """
        self.reserved_words = reserved_words or set()

    def is_valid_identifier(self, identifier: str) -> bool:
        """Check whether an identifier can name an enum member."""
        return (
            identifier.isidentifier()
            and normalize_identifier(identifier) not in self.reserved_words
        )

    def map_name(self, raw_name: str) -> str:
        """Map one raw name, raising if the result is not usable."""
        identifier = to_canonical_identifier(raw_name)
        if not self.is_valid_identifier(identifier):
            raise InvalidIdentifierError(raw_name, identifier)
        return identifier

    def map_names(self, raw_names: Iterable[str]) -> List[str]:
        """
        Map raw names to identifiers in order.

        Args:
            raw_names: Distinct raw names in declaration order

        Returns:
            Identifiers in the same order

        Raises:
            InvalidIdentifierError: If a name maps to an unusable identifier
            IdentifierCollisionError: If two names map to the same identifier
        """
        owners: Dict[str, str] = {}
        identifiers = []

        for raw_name in raw_names:
            identifier = self.map_name(raw_name)
            normalized = normalize_identifier(identifier)
            if normalized in owners:
                raise IdentifierCollisionError(normalized, owners[normalized], raw_name)
            owners[normalized] = raw_name
            identifiers.append(identifier)

        logger.debug("Mapped %d identifiers", len(identifiers))
        return identifiers

    def map_entries(self, entries) -> List[str]:
        """Map ErrorEntry objects to identifiers in declaration order."""
        return self.map_names(entry.raw_name for entry in entries)
