import re
from typing import Final

from scopelint.models.base import RuleKind
from scopelint.models.finding import InvalidItem
from scopelint.models.source_unit import ContractKind
from scopelint.services.validators.base import ParsedFile

# Upper snake case, optionally with `$` anywhere, e.g. MAX_SUPPLY or $_OWNER.
RE_VALID_CONSTANT_NAME: Final[re.Pattern[str]] = re.compile(r"^(?:[$_]*[A-Z0-9][$_]*)+$")


def is_valid_constant_name(name: str) -> bool:
    return RE_VALID_CONSTANT_NAME.match(name) is not None


def validate(parsed: ParsedFile) -> list[InvalidItem]:
    """Flag constants and immutables that are not upper snake case.

    Interface members are skipped, a compliant implementation cannot rename
    them.
    """

    variables = list(parsed.unit.variables)
    for contract in parsed.unit.contracts:
        if contract.kind == ContractKind.INTERFACE:
            continue
        variables.extend(v for v in contract.variables if v.is_constant_or_immutable)

    return [
        parsed.finding(RuleKind.CONSTANT, variable.name, variable.start_byte)
        for variable in variables
        if not is_valid_constant_name(variable.name)
    ]
