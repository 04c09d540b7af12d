from enum import StrEnum

from scopelint.models.source_unit import ContractKind, Visibility


class ProcessableNodeTypes(StrEnum):
    SOURCE_FILE = "source_file"
    CONTRACT_DECLARATION = "contract_declaration"
    INTERFACE_DECLARATION = "interface_declaration"
    LIBRARY_DECLARATION = "library_declaration"
    FUNCTION_DEFINITION = "function_definition"
    CONSTRUCTOR_DEFINITION = "constructor_definition"
    FALLBACK_RECEIVE_DEFINITION = "fallback_receive_definition"
    MODIFIER_DEFINITION = "modifier_definition"
    STATE_VARIABLE_DECLARATION = "state_variable_declaration"
    CONSTANT_VARIABLE_DECLARATION = "constant_variable_declaration"
    COMMENT = "comment"


CONTRACT_KINDS: dict[str, ContractKind] = {
    ProcessableNodeTypes.CONTRACT_DECLARATION: ContractKind.CONTRACT,
    ProcessableNodeTypes.INTERFACE_DECLARATION: ContractKind.INTERFACE,
    ProcessableNodeTypes.LIBRARY_DECLARATION: ContractKind.LIBRARY,
}
VISIBILITY_KEYWORDS: dict[str, Visibility] = {
    "public": Visibility.PUBLIC,
    "external": Visibility.EXTERNAL,
    "internal": Visibility.INTERNAL,
    "private": Visibility.PRIVATE,
}
# Some grammar versions wrap the keyword in a named node, others emit the bare keyword.
VISIBILITY_NODE_TYPE: str = "visibility"
CONSTANT_KEYWORD: str = "constant"
IMMUTABLE_KEYWORD: str = "immutable"
ABSTRACT_KEYWORD: str = "abstract"
