# =============================================================================
# Predicate Compiler — SearchQuery → SQLAlchemy WHERE clause
# =============================================================================
#
# Every term compiles to the same building block, the per-field OR:
#
#   first_name ILIKE '%term%' OR last_name ILIKE '%term%' OR ...
#
# i.e. "some searchable field contains the term, case-insensitively".
# Conditions and term lists are then combined around that block:
#
#   SingleCondition(t, OR)   → block(t)
#   SingleCondition(t, NOT)  → NOT block(t)
#   GroupCondition(ts, AND)  → block(t1) AND block(t2) AND ...
#   TermsQuery(ts, AND)      → block(t1) AND block(t2) AND ...
#   TermsQuery(ts, OR)       → block(t1) OR block(t2) OR ...
#   ConditionsQuery(cs)      → compiled(c1) AND compiled(c2) AND ...
#   empty query              → TRUE
#
# Multi-valued columns (JSON / ARRAY) are cast to text first, so a term can
# match across element boundaries of the serialized list. The match is
# approximate; token-exact matching is not supported.
#
# LIKE wildcards inside a term are escaped (autoescape), so '%' and '_'
# match literally.
# =============================================================================

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import ARRAY, JSON, ColumnElement, Text, and_, cast, not_, or_, true

from advocate_directory.services.search_query import (
    ConditionsQuery,
    GroupCondition,
    Operator,
    SearchQuery,
    SingleCondition,
)


def _is_multi_valued(column: ColumnElement) -> bool:
    return isinstance(column.type, (JSON, ARRAY))


def field_contains(column: ColumnElement, term: str) -> ColumnElement[bool]:
    """Case-insensitive substring containment of `term` in one column."""
    if _is_multi_valued(column):
        column = cast(column, Text)
    return column.icontains(term, autoescape=True)


def term_predicate(
    term: str,
    columns: Sequence[ColumnElement],
    negate: bool = False,
) -> ColumnElement[bool]:
    """
    Match records where any of `columns` contains `term`.

    With `negate=True`, match records where none of them does.
    """
    if not columns:
        clause: ColumnElement[bool] = true()
    else:
        clause = or_(*(field_contains(column, term) for column in columns))
    return not_(clause) if negate else clause


def _all_of(clauses: list[ColumnElement[bool]]) -> ColumnElement[bool]:
    if not clauses:
        return true()
    return and_(*clauses)


def _any_of(clauses: list[ColumnElement[bool]]) -> ColumnElement[bool]:
    if not clauses:
        return true()
    return or_(*clauses)


def _compile_condition(
    condition: SingleCondition | GroupCondition,
    columns: Sequence[ColumnElement],
) -> ColumnElement[bool]:
    if isinstance(condition, GroupCondition):
        return _all_of([term_predicate(term, columns) for term in condition.terms])
    return term_predicate(
        condition.term, columns, negate=condition.operator is Operator.NOT,
    )


def compile_query(
    query: SearchQuery,
    columns: Sequence[ColumnElement],
) -> ColumnElement[bool]:
    """
    Compile a SearchQuery into a boolean clause over `columns`.

    Args:
        query: Parsed search query.
        columns: The searchable columns, in field-set order.

    Returns:
        A reusable clause suitable for `select(...).where(...)`.
    """
    if isinstance(query, ConditionsQuery):
        return _all_of([_compile_condition(c, columns) for c in query.conditions])

    term_clauses = [term_predicate(term, columns) for term in query.terms]
    if query.operator is Operator.AND:
        return _all_of(term_clauses)
    return _any_of(term_clauses)
