from .base import SUPPRESSIBLE_RULES, FileKind, RuleKind
from .directive import (
    Directive,
    DirectiveKind,
    DirectiveResult,
    DisabledRegion,
    InvalidDirective,
)
from .finding import Finding, InvalidItem
from .report import Report
from .source_unit import (
    Comment,
    ContractDefinition,
    ContractKind,
    FunctionDefinition,
    FunctionKind,
    SourceUnit,
    VariableDefinition,
    Visibility,
)

__all__ = [
    "SUPPRESSIBLE_RULES",
    "Comment",
    "ContractDefinition",
    "ContractKind",
    "Directive",
    "DirectiveKind",
    "DirectiveResult",
    "DisabledRegion",
    "FileKind",
    "Finding",
    "FunctionDefinition",
    "FunctionKind",
    "InvalidDirective",
    "InvalidItem",
    "Report",
    "RuleKind",
    "SourceUnit",
    "VariableDefinition",
    "Visibility",
]
