from collections.abc import Iterator

from tree_sitter import Node as TSNode


def node_text(source: bytes, node: TSNode) -> str:
    """Extract the source code snippet for a given Tree-sitter node."""
    return source[node.start_byte : node.end_byte].decode("utf-8")


def iter_nodes_of_type(node: TSNode, node_type: str) -> Iterator[TSNode]:
    """Yield every descendant of `node` with the given type in document order."""
    stack: list[TSNode] = [node]
    while stack:
        current = stack.pop()
        if current.type == node_type:
            yield current
        stack.extend(reversed(current.children))


def first_error_node(node: TSNode) -> TSNode | None:
    """Return the first ERROR or MISSING node in document order, if any."""
    stack: list[TSNode] = [node]
    while stack:
        current = stack.pop()
        if current.is_error or current.is_missing:
            return current
        stack.extend(reversed(current.children))
    return None


def offset_to_line(source: bytes, offset: int) -> int:
    """Converts a byte offset into a 1-based line number.

    Args:
        source: Raw file contents.
        offset: Byte offset into `source`.

    Returns:
        Line containing the byte at `offset`.

    Raises:
        ValueError: If the offset lies outside the file.
    """
    if offset < 0 or offset > len(source):
        raise ValueError(f"Offset {offset} is outside of a {len(source)} byte file")
    return source.count(b"\n", 0, offset) + 1
