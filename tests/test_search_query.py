# =============================================================================
# Unit Tests — Search Query Parser
# =============================================================================
#
# Pure-function tests: no database needed. Covers every query shape in
# priority order, plus the inputs where the fixed priority decides the
# outcome (mixed keywords, overlapping separators, leading NOT).
# =============================================================================

import pytest

from advocate_directory.services.search_query import (
    MATCH_ALL,
    ConditionsQuery,
    GroupCondition,
    Operator,
    QueryShape,
    SingleCondition,
    TermsQuery,
    classify,
    parse_search_term,
    scan_keywords,
)


def _or(term: str) -> SingleCondition:
    return SingleCondition(term, Operator.OR)


def _not(term: str) -> SingleCondition:
    return SingleCondition(term, Operator.NOT)


# ---------------------------------------------------------------------------
# Keyword scanning & classification
# ---------------------------------------------------------------------------


class TestClassify:
    """Tests for scan_keywords() + classify()."""

    @pytest.mark.parametrize(
        ("raw", "shape"),
        [
            ("", QueryShape.MATCH_ALL),
            ("NOT grief", QueryShape.LEADING_NOT),
            ("NOT CBT AND PTSD", QueryShape.LEADING_NOT),
            ("Depression AND Anxiety NOT PTSD", QueryShape.AND_NOT),
            ("A AND B OR C NOT D", QueryShape.AND_NOT),
            ("PTSD OR Trauma NOT CBT", QueryShape.OR_NOT),
            ("Depression NOT CBT", QueryShape.NOT),
            ("CBT AND Depression", QueryShape.AND),
            ("A OR B AND C", QueryShape.AND),
            ("PTSD OR Trauma", QueryShape.OR),
            ("Depression", QueryShape.SINGLE),
            ("cbt and depression", QueryShape.SINGLE),
            ("NOT", QueryShape.SINGLE),
        ],
    )
    def test_shape(self, raw, shape):
        assert classify(scan_keywords(raw)) is shape

    def test_scan_records_keywords(self):
        scan = scan_keywords("A AND B NOT C")
        assert scan.has_and
        assert scan.has_not
        assert not scan.has_or
        assert not scan.leading_not

    def test_keywords_are_case_sensitive(self):
        scan = scan_keywords("a and b or c not d")
        assert not (scan.has_and or scan.has_or or scan.has_not)


# ---------------------------------------------------------------------------
# Simple shapes
# ---------------------------------------------------------------------------


class TestSimpleSearch:
    """Tests for empty, single-term, AND and OR searches."""

    def test_none_is_match_all(self):
        assert parse_search_term(None) == MATCH_ALL

    def test_empty_string_is_match_all(self):
        query = parse_search_term("")
        assert query == TermsQuery((), Operator.OR)
        assert query.is_match_all

    def test_single_term(self):
        assert parse_search_term("Depression") == TermsQuery(("Depression",), Operator.OR)

    def test_single_term_is_not_trimmed(self):
        assert parse_search_term("  Depression ") == TermsQuery(
            ("  Depression ",), Operator.OR,
        )

    def test_lowercase_keywords_are_part_of_the_term(self):
        assert parse_search_term("cbt and depression") == TermsQuery(
            ("cbt and depression",), Operator.OR,
        )

    def test_and_search(self):
        assert parse_search_term("CBT AND Depression") == TermsQuery(
            ("CBT", "Depression"), Operator.AND,
        )

    def test_and_terms_are_trimmed(self):
        assert parse_search_term("CBT  AND  Depression ") == TermsQuery(
            ("CBT", "Depression"), Operator.AND,
        )

    def test_or_search(self):
        assert parse_search_term("PTSD OR Trauma") == TermsQuery(
            ("PTSD", "Trauma"), Operator.OR,
        )

    def test_multiple_or(self):
        assert parse_search_term("PTSD OR Trauma OR Grief") == TermsQuery(
            ("PTSD", "Trauma", "Grief"), Operator.OR,
        )


# ---------------------------------------------------------------------------
# NOT shapes
# ---------------------------------------------------------------------------


class TestNotSearch:
    """Tests for searches that exclude terms."""

    def test_leading_not(self):
        assert parse_search_term("NOT CBT") == ConditionsQuery((_not("CBT"),))

    def test_leading_not_trims_rest(self):
        assert parse_search_term("NOT   grief  ") == ConditionsQuery((_not("grief"),))

    def test_leading_not_takes_the_whole_rest(self):
        """A leading NOT wins over every other keyword in the string."""
        assert parse_search_term("NOT CBT AND PTSD") == ConditionsQuery(
            (_not("CBT AND PTSD"),),
        )

    def test_term_with_single_not(self):
        assert parse_search_term("Depression NOT CBT") == ConditionsQuery(
            (_or("Depression"), _not("CBT")),
        )

    def test_term_with_multiple_not(self):
        assert parse_search_term("Depression NOT CBT NOT PTSD") == ConditionsQuery(
            (_or("Depression"), _not("CBT"), _not("PTSD")),
        )

    def test_and_with_not(self):
        assert parse_search_term("Depression AND Anxiety NOT PTSD") == ConditionsQuery(
            (
                GroupCondition(("Depression", "Anxiety"), Operator.AND),
                _not("PTSD"),
            ),
        )

    def test_and_with_multiple_not(self):
        query = parse_search_term("Depression AND Anxiety NOT PTSD NOT Trauma")
        assert query == ConditionsQuery(
            (
                GroupCondition(("Depression", "Anxiety"), Operator.AND),
                _not("PTSD"),
                _not("Trauma"),
            ),
        )

    def test_or_with_not(self):
        assert parse_search_term("PTSD OR Trauma NOT CBT") == ConditionsQuery(
            (_or("PTSD"), _or("Trauma"), _not("CBT")),
        )

    def test_or_with_multiple_not(self):
        assert parse_search_term("PTSD OR Trauma NOT CBT NOT Anxiety") == ConditionsQuery(
            (_or("PTSD"), _or("Trauma"), _not("CBT"), _not("Anxiety")),
        )


# ---------------------------------------------------------------------------
# Fixed priority between keywords
# ---------------------------------------------------------------------------


class TestKeywordPriority:
    """AND is checked before OR, with no regard for position in the string."""

    def test_and_splits_before_or(self):
        assert parse_search_term("A OR B AND C") == TermsQuery(
            ("A OR B", "C"), Operator.AND,
        )

    def test_and_not_keeps_or_inside_group_term(self):
        assert parse_search_term("A AND B OR C NOT D") == ConditionsQuery(
            (GroupCondition(("A", "B OR C"), Operator.AND), _not("D")),
        )

    def test_overlapping_and_not(self):
        """
        In "A AND NOT B" the space after AND also opens " NOT ", so the
        NOT split leaves "A AND" behind as a single group term.
        """
        assert parse_search_term("A AND NOT B") == ConditionsQuery(
            (GroupCondition(("A AND",), Operator.AND), _not("B")),
        )

    def test_parse_never_raises(self):
        for raw in [" ", "AND", " AND ", "NOT ", " NOT ", "OR OR OR", "%_\\"]:
            parse_search_term(raw)
