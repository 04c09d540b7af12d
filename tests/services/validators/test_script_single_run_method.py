import pytest

from scopelint.models.base import FileKind, RuleKind
from scopelint.services.validators.script_single_run_method import validate
from tests.utils import parse_solidity

SCRIPT_PATH = "./script/Deploy.s.sol"


def _parse_script(code: str):
    return parse_solidity(code, kind=FileKind.SCRIPT, path=SCRIPT_PATH)


def test_script_single_run_method__on_run_and_setup__returns_no_items() -> None:
    parsed = _parse_script(
        "contract Deploy {\n"
        "    constructor() {}\n"
        "    function setUp() public {}\n"
        "    function run() public {}\n"
        "    function _helper() internal {}\n"
        "}\n"
    )

    assert validate(parsed) == []


def test_script_single_run_method__on_two_public_methods__lists_them_in_order() -> None:
    parsed = _parse_script(
        "contract Deploy {\n"
        "    function run() public {}\n"
        "    function runExternal() external {}\n"
        "}\n"
    )

    items = validate(parsed)

    assert len(items) == 1
    assert items[0].kind == RuleKind.SCRIPT
    assert items[0].line == 4
    assert items[0].text == (
        "Scripts must have a single public method named `run` (excluding `setUp`), "
        'but the following methods were found: ["run", "runExternal"]'
    )
    assert items[0].description() == f"Invalid script interface in {SCRIPT_PATH}: {items[0].text}"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("contract Deploy {\n    function _run() internal {}\n}\n", "No `run` method found"),
        (
            "contract Deploy {\n    function deploy() public {}\n}\n",
            "The only public method must be named `run`",
        ),
    ],
)
def test_script_single_run_method__on_missing_run__reports_reason(code: str, expected: str) -> None:
    items = validate(_parse_script(code))

    assert [item.text for item in items] == [expected]


def test_script_single_run_method__on_multiple_contracts__anchors_at_first_with_public_method() -> None:
    parsed = _parse_script(
        "contract Base {\n"
        "    function _helper() internal {}\n"
        "}\n"
        "\n"
        "contract Deploy is Base {\n"
        "    function run() public {}\n"
        "    function other() public {}\n"
        "}\n"
    )

    items = validate(parsed)

    assert [item.line for item in items] == [8]


def test_script_single_run_method__on_disable_next_line__marks_item_suppressed() -> None:
    parsed = _parse_script(
        "// scopelint: disable-next-line(script)\n"
        "contract Deploy {\n"
        "    function deploy() public {}\n"
        "}\n"
    )

    items = validate(parsed)

    assert len(items) == 1
    assert items[0].suppressed is True


def test_script_single_run_method__on_helper_file__returns_no_items() -> None:
    parsed = parse_solidity(
        "contract Helpers {\n    function deploy() public {}\n}\n",
        kind=None,
        path="./script/Helpers.sol",
    )

    assert validate(parsed) == []
