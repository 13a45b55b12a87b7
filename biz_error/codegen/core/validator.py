"""
Catalog validation run between loading and emission.

Checks are fail-fast and rule-major: each rule is checked over every entry
before the next rule runs, and the first violation raises. Generated code is
all-or-nothing, so there is no value in accumulating diagnostics here.
"""

from typing import Callable, Dict, List, Optional

from ...logging_config import get_logger
from .config import CompilerConfig
from .errors import (
    DuplicateCodeError,
    DuplicateNameError,
    MissingFieldError,
    StatusOutOfRangeError,
)
from .naming import IdentifierMapper
from .schema import ErrorCatalog

logger = get_logger(__name__)

MIN_STATUS = 100
MAX_STATUS = 599


def check_codes_present(catalog: ErrorCatalog, config: CompilerConfig) -> None:
    for entry in catalog.entries:
        if entry.numeric_code is None:
            raise MissingFieldError(entry.raw_name, "code")


def check_messages_present(catalog: ErrorCatalog, config: CompilerConfig) -> None:
    for entry in catalog.entries:
        if not entry.messages:
            raise MissingFieldError(entry.raw_name, "message")

        if (
            config.require_default_message
            and entry.get_message(catalog.default_language) is None
        ):
            raise MissingFieldError(
                entry.raw_name, f"message.{catalog.default_language}"
            )


def check_status_range(catalog: ErrorCatalog, config: CompilerConfig) -> None:
    for entry in catalog.entries:
        if not MIN_STATUS <= entry.status_code <= MAX_STATUS:
            raise StatusOutOfRangeError(entry.raw_name, entry.status_code)


def check_unique_names(catalog: ErrorCatalog, config: CompilerConfig) -> None:
    seen = set()
    for entry in catalog.entries:
        if entry.raw_name in seen:
            raise DuplicateNameError(entry.raw_name)
        seen.add(entry.raw_name)


def check_unique_codes(catalog: ErrorCatalog, config: CompilerConfig) -> None:
    if not config.unique_codes:
        return

    owners: Dict[int, str] = {}
    for entry in catalog.entries:
        if entry.numeric_code in owners:
            raise DuplicateCodeError(
                entry.numeric_code, owners[entry.numeric_code], entry.raw_name
            )
        owners[entry.numeric_code] = entry.raw_name


def validate_catalog(
    catalog: ErrorCatalog,
    config: Optional[CompilerConfig] = None,
    mapper: Optional[IdentifierMapper] = None,
) -> List[str]:
    """
    Validate a catalog before emission.

    Args:
        catalog: Loaded catalog
        config: Compiler configuration (strictness flags)
        mapper: Identifier mapper of the target language

    Returns:
        Canonical identifiers of the entries, in declaration order

    Raises:
        SchemaError: If a required field is missing
        ValidationError: If a cross-entry invariant is violated
    """
    config = config or CompilerConfig()
    mapper = mapper or IdentifierMapper()

    rules: List[Callable[[ErrorCatalog, CompilerConfig], None]] = [
        check_codes_present,
        check_messages_present,
        check_status_range,
        check_unique_names,
    ]
    for rule in rules:
        rule(catalog, config)

    identifiers = mapper.map_entries(catalog.entries)

    check_unique_codes(catalog, config)

    logger.debug("Catalog with %d entries passed validation", len(catalog.entries))
    return identifiers
