from scopelint.models.base import FileKind, RuleKind
from scopelint.services.validators.src_names_internal import validate
from tests.utils import parse_solidity


def test_src_names_internal__on_contract__flags_internal_and_private_without_underscore() -> None:
    parsed = parse_solidity(
        "contract Sample {\n"
        "    function internalName() internal {}\n"
        "    function privateName() private {}\n"
        "    function _goodName() internal {}\n"
        "    function publicName() public {}\n"
        "    function externalName() external {}\n"
        "}\n"
    )

    items = validate(parsed)

    assert [(item.kind, item.text, item.line) for item in items] == [
        (RuleKind.SRC, "internalName", 5),
        (RuleKind.SRC, "privateName", 6),
    ]


def test_src_names_internal__on_library__returns_no_items() -> None:
    parsed = parse_solidity(
        "library Lib {\n    function helper() private pure returns (uint256) {\n"
        "        return 1;\n    }\n}\n"
    )

    assert validate(parsed) == []


def test_src_names_internal__on_free_function_without_visibility__returns_no_items() -> None:
    parsed = parse_solidity("function helper() pure returns (uint256) {\n    return 1;\n}\n")

    assert validate(parsed) == []


def test_src_names_internal__on_modifier_and_constructor__returns_no_items() -> None:
    parsed = parse_solidity(
        "contract Sample {\n"
        "    constructor() {}\n"
        "    modifier onlyOwner() {\n"
        "        _;\n"
        "    }\n"
        "}\n"
    )

    assert validate(parsed) == []


def test_src_names_internal__on_test_file__returns_no_items() -> None:
    parsed = parse_solidity(
        "contract Sample {\n    function internalName() internal {}\n}\n", kind=FileKind.TEST
    )

    assert validate(parsed) == []
