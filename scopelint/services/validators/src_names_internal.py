from scopelint.models.base import FileKind, RuleKind
from scopelint.models.finding import InvalidItem
from scopelint.models.source_unit import ContractKind, FunctionDefinition, FunctionKind
from scopelint.services.validators.base import ParsedFile


def is_valid_internal_name(function: FunctionDefinition) -> bool:
    if function.kind != FunctionKind.FUNCTION or not function.is_internal_or_private:
        return True
    return function.name.startswith("_")


def validate(parsed: ParsedFile) -> list[InvalidItem]:
    """Internal and private functions in `src` must start with an underscore.

    Library functions are exempt since `using for` call sites read better
    without the prefix.
    """

    if parsed.kind != FileKind.SRC:
        return []

    functions = list(parsed.unit.functions)
    for contract in parsed.unit.contracts:
        if contract.kind != ContractKind.LIBRARY:
            functions.extend(contract.functions)

    return [
        parsed.finding(RuleKind.SRC, function.name, function.start_byte)
        for function in functions
        if not is_valid_internal_name(function)
    ]
