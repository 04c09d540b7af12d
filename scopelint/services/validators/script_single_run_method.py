import json
from typing import Final

from scopelint.models.base import FileKind, RuleKind
from scopelint.models.finding import InvalidItem
from scopelint.models.source_unit import FunctionKind
from scopelint.services.validators.base import ParsedFile

RUN_METHOD: Final[str] = "run"
SETUP_METHOD: Final[str] = "setUp"


def validate(parsed: ParsedFile) -> list[InvalidItem]:
    """A script must expose exactly one public entry point named `run`.

    `setUp` and constructors are ignored. The finding is anchored at the first
    contract that declares a public method, so a directive placed above that
    contract can suppress it.
    """

    if parsed.kind != FileKind.SCRIPT:
        return []

    public_methods: list[str] = []
    anchor: int | None = None
    for contract in parsed.unit.contracts:
        for function in contract.functions:
            if function.kind == FunctionKind.CONSTRUCTOR or function.name == SETUP_METHOD:
                continue
            if function.is_public_or_external:
                public_methods.append(function.name)
                if anchor is None:
                    anchor = contract.start_byte

    if anchor is None:
        anchor = parsed.unit.contracts[0].start_byte if parsed.unit.contracts else 0

    match public_methods:
        case []:
            text = "No `run` method found"
        case [name] if name == RUN_METHOD:
            return []
        case [_]:
            text = "The only public method must be named `run`"
        case _:
            text = (
                "Scripts must have a single public method named `run` (excluding "
                f"`setUp`), but the following methods were found: {json.dumps(public_methods)}"
            )

    return [parsed.finding(RuleKind.SCRIPT, text, anchor)]
