"""Unit tests for query tree node types."""

from __future__ import annotations

import dataclasses

import pytest

from boolquery.query.ast_nodes import (
    AndQuery,
    NodeKind,
    OrQuery,
    PhraseLiteral,
    TermLiteral,
    WildcardLiteral,
)
from boolquery.text.normalizer import BasicTermNormalizer


class TestCompositeNodes:
    @pytest.mark.parametrize("node_type", [AndQuery, OrQuery])
    def test_requires_two_children(self, node_type: type) -> None:
        with pytest.raises(ValueError, match="at least 2 children"):
            node_type((TermLiteral("a"),))
        with pytest.raises(ValueError):
            node_type(())

    def test_children_stored_as_tuple(self) -> None:
        node = AndQuery([TermLiteral("a"), TermLiteral("b")])
        assert isinstance(node.children, tuple)

    def test_frozen(self) -> None:
        node = OrQuery((TermLiteral("a"), TermLiteral("b")))
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.children = ()  # type: ignore[misc]

    def test_str_round_trips_syntax(self) -> None:
        node = OrQuery(
            (
                AndQuery((TermLiteral("a"), WildcardLiteral("b*", negated=True))),
                PhraseLiteral('"c d"'),
            )
        )
        assert str(node) == 'a -b* + "c d"'


class TestLiteralNodes:
    def test_kinds(self) -> None:
        assert AndQuery.kind is NodeKind.AND
        assert OrQuery.kind is NodeKind.OR
        assert TermLiteral("a").kind is NodeKind.TERM
        assert PhraseLiteral('"a"').kind is NodeKind.PHRASE
        assert WildcardLiteral("a*").kind is NodeKind.WILDCARD

    def test_kind_distinguishes_equal_text(self) -> None:
        assert TermLiteral("a") != WildcardLiteral("a")

    def test_negation_fixed(self) -> None:
        term = TermLiteral("a", negated=True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            term.negated = False  # type: ignore[misc]

    def test_equality_ignores_normalizer(self) -> None:
        loose = BasicTermNormalizer(lowercase=False)
        assert TermLiteral("a", normalizer=loose) == TermLiteral("a")

    def test_term_terms(self) -> None:
        assert TermLiteral("Cat's").terms() == ["cats"]
        assert TermLiteral("!!").terms() == []

    def test_phrase_text_strips_quotes(self) -> None:
        assert PhraseLiteral('"Big  Fish!"').phrase_text == "Big  Fish!"

    def test_phrase_terms_in_order(self) -> None:
        assert PhraseLiteral('"Big  Fish! , swims"').terms() == ["big", "fish", "swims"]

    def test_wildcard_pattern(self) -> None:
        literal = WildcardLiteral("Comp*ter!")
        assert literal.pattern() == "comp*ter"
        assert literal.fragments() == ["comp", "ter"]

    def test_wildcard_leading_star(self) -> None:
        assert WildcardLiteral("*ing").fragments() == ["ing"]

    def test_wildcard_pattern_keeps_ascii_alphanumerics_only(self) -> None:
        literal = WildcardLiteral("Café_x*")
        assert literal.pattern() == "cafx*"
        assert literal.fragments() == ["cafx"]
