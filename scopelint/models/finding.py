from pydantic import BaseModel, ConfigDict, Field

from scopelint.models.base import RuleKind


class InvalidItem(BaseModel):
    """A single convention violation found by a validator."""

    model_config = ConfigDict(frozen=True)

    kind: RuleKind = Field(..., description="Validator that reported the item")
    file: str = Field(..., description="Display path of the offending file")
    text: str = Field(..., description="Details shown to the user")
    line: int = Field(..., ge=1, description="Line of the offending node")
    suppressed: bool = Field(
        default=False, description="Whether an inline directive silences the item"
    )

    def description(self) -> str:
        """Returns the line shown to the user so they can triage the finding."""

        match self.kind:
            case RuleKind.CONSTANT:
                return (
                    f"Invalid constant or immutable name in {self.file} "
                    f"on line {self.line}: {self.text}"
                )
            case RuleKind.SCRIPT:
                return f"Invalid script interface in {self.file}: {self.text}"
            case RuleKind.SRC:
                return f"Invalid src method name in {self.file} on line {self.line}: {self.text}"
            case RuleKind.TEST:
                return f"Invalid test name in {self.file} on line {self.line}: {self.text}"
            case RuleKind.DIRECTIVE:
                return f"Invalid directive in {self.file} on line {self.line}: {self.text}"

    def sort_key(self) -> tuple[int, str, int, str]:
        return (self.kind.order, self.file, self.line, self.text)


Finding = InvalidItem
