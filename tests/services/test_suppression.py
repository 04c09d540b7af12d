from scopelint.models.base import RuleKind
from scopelint.models.directive import (
    Directive,
    DirectiveKind,
    DisabledRegion,
    InvalidDirective,
)
from scopelint.services.suppression import SuppressionIndex


def _directive(
    kind: DirectiveKind,
    line: int,
    rules: frozenset[RuleKind] | None = None,
    end_line: int | None = None,
) -> Directive:
    return Directive(
        kind=kind,
        rules=rules,
        raw=str(kind),
        start_byte=line * 10,
        line=line,
        end_line=end_line or line,
    )


def test_suppression_index__on_start_end_pair__disables_lines_between_them() -> None:
    index = SuppressionIndex.build(
        [
            _directive(DirectiveKind.DISABLE_START, 5),
            _directive(DirectiveKind.DISABLE_END, 10),
        ]
    )

    assert index.regions == (
        DisabledRegion(start_line=5, end_line=10, rules=None, start_byte=50),
    )
    assert index.is_disabled(7, RuleKind.TEST)
    assert index.is_disabled(10, RuleKind.CONSTANT)
    assert not index.is_disabled(4, RuleKind.TEST)
    assert not index.is_disabled(11, RuleKind.TEST)


def test_suppression_index__on_rule_list__disables_only_listed_rules() -> None:
    index = SuppressionIndex.build(
        [_directive(DirectiveKind.DISABLE_LINE, 3, rules=frozenset({RuleKind.SRC}))]
    )

    assert index.is_disabled(3, RuleKind.SRC)
    assert not index.is_disabled(3, RuleKind.TEST)


def test_suppression_index__on_disable_next_line__covers_line_after_comment_end() -> None:
    index = SuppressionIndex.build(
        [_directive(DirectiveKind.DISABLE_NEXT_LINE, 3, end_line=5)]
    )

    assert [(r.start_line, r.end_line) for r in index.regions] == [(6, 6)]


def test_suppression_index__on_unmatched_start__reports_one_invalid_directive() -> None:
    index = SuppressionIndex.build([_directive(DirectiveKind.DISABLE_START, 2)])

    assert index.regions == ()
    assert len(index.invalid_directives) == 1
    assert index.invalid_directives[0].line == 2
    assert not index.is_disabled(3, RuleKind.TEST)


def test_suppression_index__on_nested_start__keeps_outer_region_open() -> None:
    index = SuppressionIndex.build(
        [
            _directive(DirectiveKind.DISABLE_START, 2),
            _directive(DirectiveKind.DISABLE_START, 4),
            _directive(DirectiveKind.DISABLE_END, 6),
        ]
    )

    assert [(r.start_line, r.end_line) for r in index.regions] == [(2, 6)]
    assert [d.line for d in index.invalid_directives] == [4]


def test_suppression_index__on_stray_end__reports_invalid_directive() -> None:
    index = SuppressionIndex.build([_directive(DirectiveKind.DISABLE_END, 9)])

    assert index.regions == ()
    assert [d.line for d in index.invalid_directives] == [9]
    assert index.invalid_directives[0].reason.startswith("Invalid inline config item: ")


def test_suppression_index__on_invalid_input__passes_it_through() -> None:
    invalid = InvalidDirective(reason="Invalid inline config item: nope", start_byte=0, line=1)

    index = SuppressionIndex.build([invalid])

    assert index.invalid_directives == (invalid,)


def test_suppression_index__on_directive_rule__never_disables() -> None:
    index = SuppressionIndex.build([_directive(DirectiveKind.DISABLE_LINE, 1)])

    assert not index.is_disabled(1, RuleKind.DIRECTIVE)
