from pathlib import PurePosixPath

from scopelint.config import SCRIPT_SUFFIX, SOLIDITY_SUFFIX, TEST_SUFFIX, CheckConfig
from scopelint.models.base import FileKind

# `PurePath.suffix` only looks after the last dot, so it returns ".sol" for both
# "Foo.sol" and "Foo.t.sol". Suffixes are matched literally with `endswith`.


def _is_under(path: PurePosixPath, root: str) -> bool:
    root_parts = PurePosixPath(root).parts
    return path.parts[: len(root_parts)] == root_parts and len(path.parts) > len(
        root_parts
    )


def classify(path: str | PurePosixPath, config: CheckConfig | None = None) -> FileKind | None:
    """Map a project-relative path to its file kind.

    When roots are nested, e.g. `test = "src/test"`, the deepest matching root
    wins, so `src/test/Token.t.sol` is a test and `src/Token.sol` is a source.

    Args:
        path: Path relative to the project root, e.g. `script/Deploy.s.sol`.
        config: Project layout, defaults to `src`, `script` and `test` roots.

    Returns:
        The file kind, or None for helpers and files outside every root.
    """
    config = config or CheckConfig()
    relative = PurePosixPath(path)
    name = relative.name

    candidates = [
        (kind, root)
        for kind, root, suffix in (
            (FileKind.SCRIPT, config.script, SCRIPT_SUFFIX),
            (FileKind.SRC, config.src, SOLIDITY_SUFFIX),
            (FileKind.TEST, config.test, TEST_SUFFIX),
        )
        if _is_under(relative, root) and name.endswith(suffix)
    ]
    if not candidates:
        return None

    # max() keeps the first of equally deep roots, so Script beats Src beats Test.
    kind, _ = max(candidates, key=lambda candidate: len(PurePosixPath(candidate[1]).parts))
    return kind
