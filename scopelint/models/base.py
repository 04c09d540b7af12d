from enum import StrEnum


class FileKind(StrEnum):
    """Categories of Solidity files found in forge projects.

    Script and test helpers share a root with scripts and tests but not their
    suffix, so they classify as no kind at all.
    """

    SCRIPT = "script"
    SRC = "src"
    TEST = "test"


class RuleKind(StrEnum):
    """Identifies the validator that produced a finding."""

    CONSTANT = "Constant"
    SCRIPT = "Script"
    SRC = "Src"
    TEST = "Test"
    DIRECTIVE = "Directive"

    @property
    def order(self) -> int:
        return _RULE_ORDER[self]


_RULE_ORDER: dict[RuleKind, int] = {kind: index for index, kind in enumerate(RuleKind)}

# Rule names accepted inside a directive payload, e.g. `disable-next-line(test)`.
SUPPRESSIBLE_RULES: dict[str, RuleKind] = {
    "constant": RuleKind.CONSTANT,
    "script": RuleKind.SCRIPT,
    "src": RuleKind.SRC,
    "test": RuleKind.TEST,
}
