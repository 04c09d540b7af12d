import logging
from typing import Final

from scopelint.models.finding import InvalidItem
from scopelint.services.validators import (
    constant_names,
    script_single_run_method,
    src_names_internal,
    test_names,
)
from scopelint.services.validators.base import ParsedFile, Validator

logger = logging.getLogger(__name__)

VALIDATORS: Final[tuple[Validator, ...]] = (
    constant_names.validate,
    script_single_run_method.validate,
    src_names_internal.validate,
    test_names.validate,
)


def run_validators(parsed: ParsedFile) -> list[InvalidItem]:
    """Run every validator on one file, including suppressed findings."""

    items: list[InvalidItem] = []
    for validator in VALIDATORS:
        items.extend(validator(parsed))
    logger.debug("%s: %d findings", parsed.path, len(items))
    return items


__all__ = ["VALIDATORS", "ParsedFile", "Validator", "run_validators"]
