"""Generate a human readable specification from test names.

Assumes the forge convention of one test file per source contract
(`test/ERC20.t.sol` for `ERC20`) and one test contract per method under test
(`contract Transfer is ERC20Test`). Each test name then reads as a requirement:
`test_RevertIf_SpenderHasInsufficientBalance` becomes
` Revert If: Spender Has Insufficient Balance`.
"""

import logging
import re
from pathlib import Path
from typing import Final

import typer
from pydantic import BaseModel, Field

from scopelint.config import SOLIDITY_SUFFIX, TEST_SUFFIX, CheckConfig
from scopelint.models.source_unit import ContractDefinition, ContractKind, FunctionDefinition
from scopelint.services.solidity_parser.parser import SolidityParser
from scopelint.utils.files import collect_files, read_source

logger = logging.getLogger(__name__)

RE_UPPERCASE: Final[re.Pattern[str]] = re.compile(r"([A-Z])")
TEST_PREFIX: Final[str] = "test"
TEST_STEM_SUFFIX: Final[str] = ".t"

BRANCH: Final[str] = "├── "
LAST_BRANCH: Final[str] = "└── "
PIPE: Final[str] = "│   "
SPACE: Final[str] = "    "


def requirement_from_test_name(name: str) -> str | None:
    """Turn `test_RevertIf_ZeroAddress` into ` Revert If: Zero Address`.

    Returns:
        The requirement, or None if the name has no `_` separated description.
    """

    _, separator, description = name.partition("_")
    if not separator:
        return None
    return RE_UPPERCASE.sub(r" \1", description.replace("_", ":"))


class ParsedContract(BaseModel):
    path: Path
    contract: ContractDefinition

    @property
    def name(self) -> str:
        return self.contract.name

    @property
    def name_from_file(self) -> str:
        return self.path.name.removesuffix(SOLIDITY_SUFFIX).removesuffix(TEST_STEM_SUFFIX)

    @property
    def test_functions(self) -> list[FunctionDefinition]:
        return [
            function
            for function in self.contract.functions
            if function.is_public_or_external and function.name.startswith(TEST_PREFIX)
        ]


class ContractSpecification(BaseModel):
    """A source contract and the test contracts that describe it."""

    src_contract: ParsedContract
    test_contracts: list[ParsedContract] = Field(default_factory=list)

    def test_contract_for(self, function: FunctionDefinition) -> ParsedContract | None:
        return next(
            (tc for tc in self.test_contracts if tc.name.lower() == function.name.lower()),
            None,
        )

    def render(self, color: bool = True) -> str:
        title = _style("Contract Specification:", color, bold=True)
        name = _style(self.src_contract.name, color, bold=True)
        lines = [f"\n{title} {name}"]

        functions = self.src_contract.contract.functions
        for i, function in enumerate(functions):
            is_last_function = i == len(functions) - 1
            prefix = LAST_BRANCH if is_last_function else BRANCH

            test_contract = self.test_contract_for(function)
            if test_contract is None:
                lines.append(f"{prefix}{_style(function.name, color, fg=typer.colors.RED)}")
                continue

            lines.append(f"{prefix}{function.name}")
            requirements = [
                requirement
                for test in test_contract.test_functions
                if (requirement := requirement_from_test_name(test.name)) is not None
            ]
            indent = SPACE if is_last_function else PIPE
            for j, requirement in enumerate(requirements):
                branch = LAST_BRANCH if j == len(requirements) - 1 else BRANCH
                lines.append(f"{indent}{branch}{requirement}")

        return "".join(f"{line}\n" for line in lines)


class SpecificationService(BaseModel):
    """Build contract specifications for every non-interface source contract."""

    config: CheckConfig

    def build(self) -> list[ContractSpecification]:
        """Parse source and test files and pair their contracts.

        Raises:
            SolidityParseError: If any file fails to parse.
        """

        src_contracts = self._parse_contracts(SOLIDITY_SUFFIX, self.config.src)
        test_contracts = self._parse_contracts(TEST_SUFFIX, self.config.test)

        return [
            ContractSpecification(
                src_contract=src_contract,
                test_contracts=[
                    tc for tc in test_contracts if tc.name_from_file == src_contract.name
                ],
            )
            for src_contract in src_contracts
        ]

    def render(self, color: bool = True) -> str:
        return "".join(spec.render(color=color) for spec in self.build())

    def _parse_contracts(self, suffix: str, directory: str) -> list[ParsedContract]:
        parser = SolidityParser()
        contracts: list[ParsedContract] = []
        for path in collect_files(self.config.root, [directory], suffix):
            source = read_source(path)
            if source is None:
                continue

            unit = parser.parse(source, str(path))
            if unit.functions:
                logger.debug("Skipping %d free functions in %s", len(unit.functions), path)
            contracts.extend(
                ParsedContract(path=path, contract=contract)
                for contract in unit.contracts
                if contract.kind != ContractKind.INTERFACE
            )
        return contracts


def _style(text: str, color: bool, **styles: object) -> str:
    return typer.style(text, **styles) if color else text
