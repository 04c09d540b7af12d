import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

from scopelint.models.base import RuleKind
from scopelint.models.directive import (
    Directive,
    DirectiveKind,
    DirectiveResult,
    DisabledRegion,
    InvalidDirective,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _NoOpenRegion:
    pass


@dataclass(frozen=True)
class _OpenRegion:
    start: Directive


type _RegionState = _NoOpenRegion | _OpenRegion


class SuppressionIndex(BaseModel):
    """Disabled line ranges of one file.

    Built once per file from its ordered directive list and shared read-only
    by every validator that inspects the file.
    """

    model_config = ConfigDict(frozen=True)

    regions: tuple[DisabledRegion, ...] = ()
    invalid_directives: tuple[InvalidDirective, ...] = ()

    @classmethod
    def build(cls, directives: Sequence[DirectiveResult]) -> "SuppressionIndex":
        """Turn directives into regions.

        `disable-start`/`disable-end` pairing is an explicit two-state
        automaton consumed left to right. A nested start, a stray end, and a
        start left open at end of file become invalid directives. A nested
        start leaves the outer region open; a stray end and an unclosed start
        produce no region.

        Args:
            directives: Directives and invalid directives in file order.

        Returns:
            The index with its regions and every invalid directive.
        """

        regions: list[DisabledRegion] = []
        invalid: list[InvalidDirective] = []
        state: _RegionState = _NoOpenRegion()

        for item in directives:
            if isinstance(item, InvalidDirective):
                invalid.append(item)
                continue

            match item.kind:
                case DirectiveKind.DISABLE_NEXT_LINE:
                    regions.append(
                        DisabledRegion(
                            start_line=item.end_line + 1,
                            end_line=item.end_line + 1,
                            rules=item.rules,
                            start_byte=item.start_byte,
                        )
                    )
                case DirectiveKind.DISABLE_LINE:
                    regions.append(
                        DisabledRegion(
                            start_line=item.line,
                            end_line=item.line,
                            rules=item.rules,
                            start_byte=item.start_byte,
                        )
                    )
                case DirectiveKind.DISABLE_START:
                    if isinstance(state, _OpenRegion):
                        invalid.append(
                            _invalid(
                                item,
                                "disable-start found while the disable-start on "
                                f"line {state.start.line} is still open",
                            )
                        )
                    else:
                        state = _OpenRegion(start=item)
                case DirectiveKind.DISABLE_END:
                    if isinstance(state, _OpenRegion):
                        regions.append(
                            DisabledRegion(
                                start_line=state.start.line,
                                end_line=item.end_line,
                                rules=state.start.rules,
                                start_byte=state.start.start_byte,
                            )
                        )
                        state = _NoOpenRegion()
                    else:
                        invalid.append(
                            _invalid(item, "disable-end found without a matching disable-start")
                        )

        if isinstance(state, _OpenRegion):
            invalid.append(
                _invalid(state.start, "disable-start found without a matching disable-end")
            )

        invalid.sort(key=lambda directive: directive.start_byte)
        logger.debug(
            "Built %d disabled regions, %d invalid directives", len(regions), len(invalid)
        )
        return cls(regions=tuple(regions), invalid_directives=tuple(invalid))

    def is_disabled(self, line: int, rule: RuleKind) -> bool:
        """Returns true if findings of `rule` on `line` are suppressed."""

        if rule == RuleKind.DIRECTIVE:
            return False
        return any(region.covers(line, rule) for region in self.regions)


def _invalid(directive: Directive, reason: str) -> InvalidDirective:
    return InvalidDirective(
        reason=f"Invalid inline config item: {reason}",
        start_byte=directive.start_byte,
        line=directive.line,
    )
