from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from scopelint.models.base import FileKind, RuleKind
from scopelint.models.finding import InvalidItem
from scopelint.models.source_unit import SourceUnit
from scopelint.services.suppression import SuppressionIndex
from scopelint.utils.treesitter_helpers import offset_to_line


class ParsedFile(BaseModel):
    """Everything a validator needs to inspect one file."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Display path, e.g. ./src/Counter.sol")
    kind: FileKind | None = Field(
        default=None, description="File kind, None for helpers under a root"
    )
    source: bytes
    unit: SourceUnit
    suppression: SuppressionIndex = Field(default_factory=SuppressionIndex)

    def finding(self, kind: RuleKind, text: str, start_byte: int) -> InvalidItem:
        """Build a finding located at `start_byte`, marked suppressed if a
        directive covers its line."""

        line = offset_to_line(self.source, start_byte)
        return InvalidItem(
            kind=kind,
            file=self.path,
            text=text,
            line=line,
            suppressed=self.suppression.is_disabled(line, kind),
        )


type Validator = Callable[[ParsedFile], list[InvalidItem]]
