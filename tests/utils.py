from scopelint.models.base import FileKind
from scopelint.services.directives import extract_directives
from scopelint.services.solidity_parser.parser import SolidityParser
from scopelint.services.suppression import SuppressionIndex
from scopelint.services.validators import ParsedFile

PRAGMA: str = "// SPDX-License-Identifier: MIT\npragma solidity ^0.8.17;\n\n"


def parse_solidity(
    code: str, kind: FileKind | None = FileKind.SRC, path: str = "./src/Sample.sol"
) -> ParsedFile:
    """Parse a snippet the way the checker parses a file on disk."""
    source = (PRAGMA + code).encode("utf-8")
    unit = SolidityParser().parse(source, path)
    return ParsedFile(
        path=path,
        kind=kind,
        source=source,
        unit=unit,
        suppression=SuppressionIndex.build(extract_directives(unit.comments, source)),
    )


def line_of(source: bytes, needle: bytes, start: int = 0) -> int:
    """Return the 1-based line of the first occurrence of `needle`."""
    index = source.find(needle, start)
    if index < 0:
        raise ValueError(f"{needle!r} not found")
    return source.count(b"\n", 0, index) + 1
