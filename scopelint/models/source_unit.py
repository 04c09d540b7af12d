from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ContractKind(StrEnum):
    """Enumeration of contract-like declarations."""

    CONTRACT = "contract"
    ABSTRACT = "abstract"
    LIBRARY = "library"
    INTERFACE = "interface"


class FunctionKind(StrEnum):
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    FALLBACK = "fallback"
    RECEIVE = "receive"
    MODIFIER = "modifier"


class Visibility(StrEnum):
    PUBLIC = "public"
    EXTERNAL = "external"
    INTERNAL = "internal"
    PRIVATE = "private"


class Comment(BaseModel):
    """A single `//` or `/* */` comment with its byte span in the file."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Raw comment text including delimiters")
    start_byte: int = Field(..., ge=0, description="Offset of the first byte")
    end_byte: int = Field(..., ge=0, description="Offset one past the last byte")

    @model_validator(mode="after")
    def validate_byte_range(self) -> "Comment":
        """Ensure end_byte is not before start_byte."""

        if self.end_byte < self.start_byte:
            raise ValueError("end_byte must be greater than or equal to start_byte")
        return self


class FunctionDefinition(BaseModel):
    """Represents a function, constructor, fallback, receive or modifier."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        description="Function name, or the keyword for constructor/fallback/receive",
    )
    kind: FunctionKind = FunctionKind.FUNCTION
    visibility: Visibility | None = Field(
        default=None, description="Explicit visibility keyword if present"
    )
    start_byte: int = Field(..., ge=0, description="Offset of the declaration")

    @property
    def is_internal_or_private(self) -> bool:
        return self.visibility in (Visibility.INTERNAL, Visibility.PRIVATE)

    @property
    def is_public_or_external(self) -> bool:
        return self.visibility in (Visibility.PUBLIC, Visibility.EXTERNAL)


class VariableDefinition(BaseModel):
    """Represents a state variable or a file-level constant."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Variable name")
    is_constant: bool = False
    is_immutable: bool = False
    start_byte: int = Field(..., ge=0, description="Offset of the declaration")

    @property
    def is_constant_or_immutable(self) -> bool:
        return self.is_constant or self.is_immutable


class ContractDefinition(BaseModel):
    """Represents a contract, abstract contract, library or interface."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Contract name")
    kind: ContractKind = ContractKind.CONTRACT
    start_byte: int = Field(..., ge=0, description="Offset of the declaration")
    functions: list[FunctionDefinition] = Field(default_factory=list)
    variables: list[VariableDefinition] = Field(default_factory=list)


class SourceUnit(BaseModel):
    """Typed view of one parsed Solidity file."""

    model_config = ConfigDict(frozen=True)

    contracts: list[ContractDefinition] = Field(default_factory=list)
    functions: list[FunctionDefinition] = Field(
        default_factory=list, description="Free functions declared at file level"
    )
    variables: list[VariableDefinition] = Field(
        default_factory=list, description="Constants declared at file level"
    )
    comments: list[Comment] = Field(
        default_factory=list, description="All comments in source order"
    )
