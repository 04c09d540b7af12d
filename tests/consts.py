"""Shared test path constants."""

from pathlib import Path
from typing import Final

TESTS_DIR: Final[Path] = Path(__file__).resolve().parent
PROJECT_ROOT: Final[Path] = TESTS_DIR.parent
TEST_DATA_DIR: Final[Path] = TESTS_DIR / "data"
SOLIDITY_DATA_DIR: Final[Path] = TEST_DATA_DIR / "solidity"
DECLARATIONS_FILE: Final[Path] = SOLIDITY_DATA_DIR / "declarations.sol"
BROKEN_FILE: Final[Path] = SOLIDITY_DATA_DIR / "broken.sol"
CHECK_PROJECT_WITH_FINDINGS: Final[Path] = TEST_DATA_DIR / "check_proj1"
CHECK_PROJECT_CLEAN: Final[Path] = TEST_DATA_DIR / "check_proj2"
SPEC_PROJECT: Final[Path] = TEST_DATA_DIR / "spec_proj1"
