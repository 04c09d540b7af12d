from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from scopelint.models.base import RuleKind


class DirectiveKind(StrEnum):
    """Inline suppression keywords following the `scopelint:` marker."""

    DISABLE_NEXT_LINE = "disable-next-line"
    DISABLE_LINE = "disable-line"
    DISABLE_START = "disable-start"
    DISABLE_END = "disable-end"


class Directive(BaseModel):
    """A parsed suppression comment."""

    model_config = ConfigDict(frozen=True)

    kind: DirectiveKind
    rules: frozenset[RuleKind] | None = Field(
        default=None, description="Rules to suppress, None suppresses all of them"
    )
    raw: str = Field(..., description="Comment body following the marker")
    start_byte: int = Field(..., ge=0, description="Offset of the comment")
    line: int = Field(..., ge=1, description="Line the comment starts on")
    end_line: int = Field(..., ge=1, description="Line the comment ends on")

    @model_validator(mode="after")
    def validate_line_range(self) -> "Directive":
        """Ensure end_line is not before line."""

        if self.end_line < self.line:
            raise ValueError("end_line must be greater than or equal to line")
        return self


class InvalidDirective(BaseModel):
    """A marker comment that could not be used for suppression."""

    model_config = ConfigDict(frozen=True)

    reason: str
    start_byte: int = Field(..., ge=0)
    line: int = Field(..., ge=1)


type DirectiveResult = Directive | InvalidDirective


class DisabledRegion(BaseModel):
    """Closed range of lines in which findings are suppressed."""

    model_config = ConfigDict(frozen=True)

    start_line: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)
    rules: frozenset[RuleKind] | None = None
    start_byte: int = Field(..., ge=0, description="Offset of the originating directive")

    @model_validator(mode="after")
    def validate_line_range(self) -> "DisabledRegion":
        """Ensure end_line is not before start_line."""

        if self.end_line < self.start_line:
            raise ValueError("end_line must be greater than or equal to start_line")
        return self

    def covers(self, line: int, rule: RuleKind) -> bool:
        if not self.start_line <= line <= self.end_line:
            return False
        return self.rules is None or rule in self.rules
