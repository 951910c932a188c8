# =============================================================================
# Search Query Parser — Keyword Scanner + Priority-Ordered Shapes
# =============================================================================
#
# Turns one raw search string into a typed SearchQuery.
#
# The language is small: terms joined by the space-bounded,
# case-sensitive keywords " AND ", " OR ", " NOT ", plus a leading "NOT ".
# There are no parentheses, no escaping, and no nesting.
#
# PIPELINE:
#   raw string
#     → scan_keywords()  — which keywords occur (KeywordScan)
#     → classify()       — first matching QueryShape, in fixed priority order
#     → _BUILDERS[shape] — split the raw string into terms/conditions
#     → SearchQuery      — TermsQuery | ConditionsQuery
#
# PRIORITY (first match wins; the order is the precedence):
#   1. MATCH_ALL    empty / absent
#   2. LEADING_NOT  starts with "NOT "
#   3. AND_NOT      contains " AND " and " NOT "
#   4. OR_NOT       contains " OR " and " NOT "
#   5. NOT          contains " NOT "
#   6. AND          contains " AND "
#   7. OR           contains " OR "
#   8. SINGLE       anything else
#
# Splitting always uses str.split on the literal separator, so overlapping
# keywords (e.g. "A AND NOT B") decompose exactly as the split produces.
# =============================================================================

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

AND_SEPARATOR = " AND "
OR_SEPARATOR = " OR "
NOT_SEPARATOR = " NOT "
LEADING_NOT = "NOT "


class Operator(str, enum.Enum):
    """Boolean keyword attached to a term list or a condition."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


# ---------------------------------------------------------------------------
# Query Types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SingleCondition:
    """One term tagged OR (must match) or NOT (must not match)."""

    term: str
    operator: Operator


@dataclass(frozen=True)
class GroupCondition:
    """Terms that must all match, each in any field."""

    terms: tuple[str, ...]
    operator: Operator = Operator.AND


Condition = SingleCondition | GroupCondition


@dataclass(frozen=True)
class TermsQuery:
    """A flat term list combined uniformly with AND or OR."""

    terms: tuple[str, ...]
    operator: Operator = Operator.OR

    @property
    def is_match_all(self) -> bool:
        return not self.terms


@dataclass(frozen=True)
class ConditionsQuery:
    """
    Heterogeneous clauses, always combined with AND at the top level.

    The OR tag on a SingleCondition only says the term must be present;
    it never turns the top-level combinator into OR.
    """

    conditions: tuple[Condition, ...]


SearchQuery = TermsQuery | ConditionsQuery

MATCH_ALL = TermsQuery(terms=(), operator=Operator.OR)


# ---------------------------------------------------------------------------
# Keyword Scanner
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeywordScan:
    """Which keyword separators occur in a raw search string."""

    raw: str
    leading_not: bool
    has_and: bool
    has_or: bool
    has_not: bool


def scan_keywords(raw: str) -> KeywordScan:
    """Record the presence of every keyword separator in `raw`."""
    return KeywordScan(
        raw=raw,
        leading_not=raw.startswith(LEADING_NOT),
        has_and=AND_SEPARATOR in raw,
        has_or=OR_SEPARATOR in raw,
        has_not=NOT_SEPARATOR in raw,
    )


class QueryShape(enum.Enum):
    MATCH_ALL = "match_all"
    LEADING_NOT = "leading_not"
    AND_NOT = "and_not"
    OR_NOT = "or_not"
    NOT = "not"
    AND = "and"
    OR = "or"
    SINGLE = "single"


# Checked top to bottom; the order must not change.
_SHAPE_RULES: tuple[tuple[QueryShape, Callable[[KeywordScan], bool]], ...] = (
    (QueryShape.MATCH_ALL, lambda s: not s.raw),
    (QueryShape.LEADING_NOT, lambda s: s.leading_not),
    (QueryShape.AND_NOT, lambda s: s.has_and and s.has_not),
    (QueryShape.OR_NOT, lambda s: s.has_or and s.has_not),
    (QueryShape.NOT, lambda s: s.has_not),
    (QueryShape.AND, lambda s: s.has_and),
    (QueryShape.OR, lambda s: s.has_or),
)


def classify(scan: KeywordScan) -> QueryShape:
    """Return the first shape whose rule matches the scan."""
    for shape, rule in _SHAPE_RULES:
        if rule(scan):
            return shape
    return QueryShape.SINGLE


# ---------------------------------------------------------------------------
# Shape Builders
# ---------------------------------------------------------------------------


def _split_terms(text: str, separator: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in text.split(separator))


def _not_conditions(parts: list[str]) -> tuple[SingleCondition, ...]:
    return tuple(SingleCondition(part.strip(), Operator.NOT) for part in parts)


def _build_leading_not(raw: str) -> SearchQuery:
    term = raw[len(LEADING_NOT):].strip()
    return ConditionsQuery((SingleCondition(term, Operator.NOT),))


def _build_and_not(raw: str) -> SearchQuery:
    and_part, *not_parts = raw.split(NOT_SEPARATOR)
    group = GroupCondition(_split_terms(and_part, AND_SEPARATOR), Operator.AND)
    return ConditionsQuery((group, *_not_conditions(not_parts)))


def _build_or_not(raw: str) -> SearchQuery:
    or_part, *not_parts = raw.split(NOT_SEPARATOR)
    or_conditions = tuple(
        SingleCondition(term, Operator.OR)
        for term in _split_terms(or_part, OR_SEPARATOR)
    )
    return ConditionsQuery((*or_conditions, *_not_conditions(not_parts)))


def _build_not(raw: str) -> SearchQuery:
    main_term, *not_parts = raw.split(NOT_SEPARATOR)
    main = SingleCondition(main_term.strip(), Operator.OR)
    return ConditionsQuery((main, *_not_conditions(not_parts)))


def _build_and(raw: str) -> SearchQuery:
    return TermsQuery(_split_terms(raw, AND_SEPARATOR), Operator.AND)


def _build_or(raw: str) -> SearchQuery:
    return TermsQuery(_split_terms(raw, OR_SEPARATOR), Operator.OR)


def _build_single(raw: str) -> SearchQuery:
    # The raw string is used as-is, without trimming
    return TermsQuery((raw,), Operator.OR)


_BUILDERS: dict[QueryShape, Callable[[str], SearchQuery]] = {
    QueryShape.MATCH_ALL: lambda raw: MATCH_ALL,
    QueryShape.LEADING_NOT: _build_leading_not,
    QueryShape.AND_NOT: _build_and_not,
    QueryShape.OR_NOT: _build_or_not,
    QueryShape.NOT: _build_not,
    QueryShape.AND: _build_and,
    QueryShape.OR: _build_or,
    QueryShape.SINGLE: _build_single,
}


def parse_search_term(raw: str | None) -> SearchQuery:
    """
    Parse a raw search string into a SearchQuery.

    Never raises for string input: anything without a recognised keyword
    pattern becomes a single-term OR search.

    Examples:
        "CBT AND Depression"     → TermsQuery(("CBT", "Depression"), AND)
        "NOT CBT"                → ConditionsQuery((Single("CBT", NOT),))
        "Depression NOT CBT"     → ConditionsQuery((Single("Depression", OR),
                                                    Single("CBT", NOT)))
    """
    if not raw:
        return MATCH_ALL
    shape = classify(scan_keywords(raw))
    return _BUILDERS[shape](raw)
