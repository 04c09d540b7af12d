import logging
from typing import Final

import tree_sitter_solidity as tssol
from pydantic import BaseModel, PrivateAttr
from tree_sitter import Language, Parser

from scopelint.models.source_unit import SourceUnit
from scopelint.services.solidity_parser.node_processor import NodeProcessor
from scopelint.utils.treesitter_helpers import first_error_node, offset_to_line

logger = logging.getLogger(__name__)

SOLIDITY_LANGUAGE: Final[Language] = Language(tssol.language())


class SolidityParseError(ValueError):
    """Raised when a file does not parse cleanly."""


class SolidityParser(BaseModel):
    """Parse Solidity sources into typed `SourceUnit` models.

    Parser instances are cheap; create one per file or per thread since the
    underlying tree-sitter parser is not shared between threads.
    """

    __parser: Parser = PrivateAttr(default_factory=lambda: Parser(SOLIDITY_LANGUAGE))

    def parse(self, source: bytes, path: str = "<source>") -> SourceUnit:
        """Parse raw file contents.

        Args:
            source: Raw bytes of a Solidity file.
            path: Display path used in error messages.

        Returns:
            Typed declarations and comments of the file.

        Raises:
            SolidityParseError: If the syntax tree contains errors.
        """

        tree = self.__parser.parse(source)
        root = tree.root_node
        if root.has_error:
            error_node = first_error_node(root)
            offset = error_node.start_byte if error_node is not None else 0
            raise SolidityParseError(
                f"Failed to parse {path}: syntax error on line "
                f"{offset_to_line(source, offset)}"
            )

        logger.debug("Parsed %s (%d bytes)", path, len(source))
        return NodeProcessor(source=source).process(root)
