import re
from typing import Final

from scopelint.models.base import FileKind, RuleKind
from scopelint.models.finding import InvalidItem
from scopelint.services.validators.base import ParsedFile

RE_VALID_TEST_NAME: Final[re.Pattern[str]] = re.compile(
    r"^test(Fork)?(Fuzz)?(_Revert(If|When|On|Given))?_\w+$"
)
REVERT_KEYWORD: Final[str] = "Revert"
REVERT_CONDITIONS: Final[frozenset[str]] = frozenset({"If", "When", "On", "Given"})
TEST_PREFIX: Final[str] = "test"


def is_valid_test_name(name: str) -> bool:
    """Check a test name against the naming convention.

    Names look like `test_Description`, `testFuzz_Description`, or
    `testForkFuzz_RevertIf_Condition`. Any segment mentioning `Revert` must be
    exactly `Revert` followed by one of If, When, On or Given, so
    `test_Foo_RevertIfBar` and `test_RevertsIf_Bar` are both rejected.
    """

    if RE_VALID_TEST_NAME.match(name) is None:
        return False

    for segment in name.split("_"):
        if REVERT_KEYWORD not in segment:
            continue
        if not segment.startswith(REVERT_KEYWORD):
            return False
        if segment.removeprefix(REVERT_KEYWORD) not in REVERT_CONDITIONS:
            return False
    return True


def validate(parsed: ParsedFile) -> list[InvalidItem]:
    if parsed.kind != FileKind.TEST:
        return []

    return [
        parsed.finding(RuleKind.TEST, function.name, function.start_byte)
        for contract in parsed.unit.contracts
        for function in contract.functions
        if function.is_public_or_external
        and function.name.startswith(TEST_PREFIX)
        and not is_valid_test_name(function.name)
    ]
