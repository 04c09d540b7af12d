"""Parse `scopelint:` suppression directives out of a file's comments.

Supported forms, one per comment:

    // scopelint: disable-next-line
    // scopelint: disable-line(test)
    /* scopelint: disable-start(constant, src) */
    // scopelint: disable-end

A comment that starts with the marker but does not match one of these forms is
reported as an invalid directive instead of being ignored, so a typo never
silently disables suppression.
"""

import logging
import re
from collections.abc import Iterable
from typing import Final

from scopelint.models.base import SUPPRESSIBLE_RULES, RuleKind
from scopelint.models.directive import (
    Directive,
    DirectiveKind,
    DirectiveResult,
    InvalidDirective,
)
from scopelint.models.source_unit import Comment
from scopelint.utils.treesitter_helpers import offset_to_line

logger = logging.getLogger(__name__)

DIRECTIVE_MARKER: Final[str] = "scopelint:"

RE_DIRECTIVE: Final[re.Pattern[str]] = re.compile(
    r"^(?P<kind>disable-next-line|disable-line|disable-start|disable-end)"
    r"(?:\s*\((?P<rules>[^()]*)\))?$"
)


class DirectiveSyntaxError(ValueError):
    """Raised for a marker comment that does not parse."""


def comment_body(text: str) -> str:
    """Strip comment delimiters and surrounding whitespace."""
    if text.startswith("//"):
        return text.lstrip("/").strip()
    if text.startswith("/*"):
        body = text[2:-2] if text.endswith("*/") and len(text) >= 4 else text[2:]
        return body.strip().lstrip("*").strip()
    return text.strip()


def _parse_rules(raw: str | None) -> frozenset[RuleKind] | None:
    if raw is None:
        return None

    rules: set[RuleKind] = set()
    for part in raw.split(","):
        name = part.strip().lower()
        if name not in SUPPRESSIBLE_RULES:
            raise DirectiveSyntaxError(f"unknown rule {part.strip()!r}")
        rules.add(SUPPRESSIBLE_RULES[name])
    return frozenset(rules)


def _parse_payload(payload: str) -> tuple[DirectiveKind, frozenset[RuleKind] | None]:
    match = RE_DIRECTIVE.match(payload)
    if match is None:
        raise DirectiveSyntaxError(payload)

    kind = DirectiveKind(match.group("kind"))
    rules = _parse_rules(match.group("rules"))
    if kind == DirectiveKind.DISABLE_END and rules is not None:
        raise DirectiveSyntaxError("disable-end does not take rules")
    return kind, rules


def parse_directive(comment: Comment, source: bytes) -> DirectiveResult | None:
    """Parse one comment.

    Args:
        comment: Comment taken from the syntax tree.
        source: Raw file contents the comment offsets refer to.

    Returns:
        A directive, an invalid directive, or None for an ordinary comment.
    """
    body = comment_body(comment.text)
    if not body.startswith(DIRECTIVE_MARKER):
        return None

    payload = body.removeprefix(DIRECTIVE_MARKER).strip()
    line = offset_to_line(source, comment.start_byte)
    try:
        kind, rules = _parse_payload(payload)
    except DirectiveSyntaxError:
        logger.debug("Invalid directive on line %d: %r", line, payload)
        return InvalidDirective(
            reason=f"Invalid inline config item: {payload}",
            start_byte=comment.start_byte,
            line=line,
        )

    last_byte = max(comment.start_byte, comment.end_byte - 1)
    return Directive(
        kind=kind,
        rules=rules,
        raw=payload,
        start_byte=comment.start_byte,
        line=line,
        end_line=offset_to_line(source, last_byte),
    )


def extract_directives(comments: Iterable[Comment], source: bytes) -> list[DirectiveResult]:
    """Return directives and invalid directives in order of appearance."""
    results: list[DirectiveResult] = []
    for comment in sorted(comments, key=lambda c: c.start_byte):
        result = parse_directive(comment, source)
        if result is not None:
            results.append(result)
    return results
