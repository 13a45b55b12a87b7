"""
Python-specific naming utilities.

Enum member names must not be Python keywords. Canonical identifiers always
start with an upper-cased character, so only the capitalized keywords can
actually collide, but the full set is kept for direct use of the mapper.
"""

import keyword

from ...core.naming import IdentifierMapper


# Python reserved keywords, including soft keywords
PYTHON_RESERVED_WORDS = set(keyword.kwlist) | set(keyword.softkwlist)

# Module-level names the generated class body resolves while it executes.
# A member with one of these names would shadow it inside the class namespace.
CLASS_BODY_NAMES = {
    "HTTPStatus",
}


def create_python_mapper() -> IdentifierMapper:
    """Create an identifier mapper configured for Python enums."""
    return IdentifierMapper(PYTHON_RESERVED_WORDS | CLASS_BODY_NAMES)
