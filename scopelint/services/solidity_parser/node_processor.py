import logging

from pydantic import BaseModel
from tree_sitter import Node as TSNode

from scopelint.models.source_unit import (
    Comment,
    ContractDefinition,
    ContractKind,
    FunctionDefinition,
    FunctionKind,
    SourceUnit,
    VariableDefinition,
    Visibility,
)
from scopelint.services.solidity_parser.consts import (
    ABSTRACT_KEYWORD,
    CONSTANT_KEYWORD,
    CONTRACT_KINDS,
    IMMUTABLE_KEYWORD,
    VISIBILITY_KEYWORDS,
    VISIBILITY_NODE_TYPE,
    ProcessableNodeTypes,
)
from scopelint.utils.treesitter_helpers import iter_nodes_of_type, node_text

logger = logging.getLogger(__name__)


class NodeProcessor(BaseModel):
    """Convert a tree-sitter Solidity tree into a `SourceUnit`.

    Declarations whose shape is not understood (e.g. a function without a
    name) are skipped rather than failing the whole file.
    """

    source: bytes

    def process(self, root: TSNode) -> SourceUnit:
        contracts: list[ContractDefinition] = []
        functions: list[FunctionDefinition] = []
        variables: list[VariableDefinition] = []

        for child in root.named_children:
            if child.type in CONTRACT_KINDS:
                contract = self.__process_contract(child)
                if contract is not None:
                    contracts.append(contract)
            elif child.type == ProcessableNodeTypes.FUNCTION_DEFINITION:
                function = self.__process_function(child)
                if function is not None:
                    functions.append(function)
            elif child.type == ProcessableNodeTypes.CONSTANT_VARIABLE_DECLARATION:
                variable = self.__process_variable(child)
                if variable is not None:
                    variables.append(variable)

        return SourceUnit(
            contracts=contracts,
            functions=functions,
            variables=variables,
            comments=self.__collect_comments(root),
        )

    def __get_snippet(self, node: TSNode) -> str:
        return node_text(self.source, node)

    def __name_of(self, node: TSNode) -> str | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            logger.debug(
                "Skipping nameless %s at byte %d", node.type, node.start_byte
            )
            return None
        return self.__get_snippet(name_node)

    def __process_contract(self, node: TSNode) -> ContractDefinition | None:
        name = self.__name_of(node)
        if name is None:
            return None

        kind = CONTRACT_KINDS[node.type]
        if kind == ContractKind.CONTRACT and any(
            child.type == ABSTRACT_KEYWORD for child in node.children
        ):
            kind = ContractKind.ABSTRACT

        functions: list[FunctionDefinition] = []
        variables: list[VariableDefinition] = []
        body = node.child_by_field_name("body")
        members = body.named_children if body is not None else []
        for member in members:
            if member.type == ProcessableNodeTypes.STATE_VARIABLE_DECLARATION:
                variable = self.__process_variable(member)
                if variable is not None:
                    variables.append(variable)
            elif member.type in (
                ProcessableNodeTypes.FUNCTION_DEFINITION,
                ProcessableNodeTypes.CONSTRUCTOR_DEFINITION,
                ProcessableNodeTypes.FALLBACK_RECEIVE_DEFINITION,
                ProcessableNodeTypes.MODIFIER_DEFINITION,
            ):
                function = self.__process_function(member)
                if function is not None:
                    functions.append(function)

        return ContractDefinition(
            name=name,
            kind=kind,
            start_byte=node.start_byte,
            functions=functions,
            variables=variables,
        )

    def __visibility_of(self, node: TSNode) -> Visibility | None:
        for child in node.children:
            if child.type == VISIBILITY_NODE_TYPE:
                return VISIBILITY_KEYWORDS.get(self.__get_snippet(child).strip())
            if child.type in VISIBILITY_KEYWORDS:
                return VISIBILITY_KEYWORDS[child.type]
        return None

    def __process_function(self, node: TSNode) -> FunctionDefinition | None:
        kind: FunctionKind
        name: str | None
        match node.type:
            case ProcessableNodeTypes.CONSTRUCTOR_DEFINITION:
                kind, name = FunctionKind.CONSTRUCTOR, "constructor"
            case ProcessableNodeTypes.FALLBACK_RECEIVE_DEFINITION:
                is_receive = any(child.type == "receive" for child in node.children)
                kind = FunctionKind.RECEIVE if is_receive else FunctionKind.FALLBACK
                name = str(kind)
            case ProcessableNodeTypes.MODIFIER_DEFINITION:
                kind, name = FunctionKind.MODIFIER, self.__name_of(node)
            case _:
                kind, name = FunctionKind.FUNCTION, self.__name_of(node)

        if name is None:
            return None

        return FunctionDefinition(
            name=name,
            kind=kind,
            visibility=self.__visibility_of(node),
            start_byte=node.start_byte,
        )

    def __process_variable(self, node: TSNode) -> VariableDefinition | None:
        name = self.__name_of(node)
        if name is None:
            return None

        child_types = {child.type for child in node.children}
        return VariableDefinition(
            name=name,
            is_constant=CONSTANT_KEYWORD in child_types
            or node.type == ProcessableNodeTypes.CONSTANT_VARIABLE_DECLARATION,
            is_immutable=IMMUTABLE_KEYWORD in child_types,
            start_byte=node.start_byte,
        )

    def __collect_comments(self, root: TSNode) -> list[Comment]:
        return [
            Comment(
                text=self.__get_snippet(node),
                start_byte=node.start_byte,
                end_byte=node.end_byte,
            )
            for node in iter_nodes_of_type(root, ProcessableNodeTypes.COMMENT)
        ]
