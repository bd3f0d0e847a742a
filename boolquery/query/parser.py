"""Parse boolean query syntax into a query tree.

Grammar::

    Query   := Group ('+' Group)*
    Group   := Literal (' ' Literal)*
    Literal := '-'? (Term | '"' PhraseText '"' | WildcardTerm)

Groups are OR-ed, literals inside a group are AND-ed. There is no tokenizer:
literal boundaries are found by scanning for the next space and the next
double quote together. Malformed quoting never raises; it degrades to plain
term literals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from boolquery.exceptions import QueryTypeError
from boolquery.query.ast_nodes import (
    AndQuery,
    OrQuery,
    PhraseLiteral,
    QueryNode,
    TermLiteral,
    WildcardLiteral,
)
from boolquery.text.normalizer import BasicTermNormalizer, TermNormalizer

logger = logging.getLogger(__name__)

_GROUP_SEPARATORS = frozenset(" +")

_default_normalizer = BasicTermNormalizer()


@dataclass(frozen=True)
class ScanBounds:
    """A ``(start, length)`` slice of the string being scanned."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


def find_next_group(query: str, start: int) -> ScanBounds | None:
    """Locate the next ``+``-delimited group at or after ``start``.

    Leading spaces and ``+`` signs are skipped, and the group is trimmed back
    from the next ``+`` so that empty groups between consecutive separators
    disappear.

    Returns:
        Bounds of the group, or None when only separators remain.
    """
    length = len(query)
    while start < length and query[start] in _GROUP_SEPARATORS:
        start += 1
    if start >= length:
        return None

    next_plus = query.find("+", start + 1)
    if next_plus < 0:
        return ScanBounds(start, length - start)

    last = next_plus
    while query[last] in _GROUP_SEPARATORS:
        last -= 1
    return ScanBounds(start, last + 1 - start)


def find_next_literal(
    group: str,
    start: int,
    normalizer: TermNormalizer | None = None,
) -> tuple[ScanBounds, QueryNode] | None:
    """Extract one literal from ``group`` starting at ``start``.

    The returned bounds cover exactly what was consumed (a leading ``-`` is
    consumed but excluded from the bounds start, quotes of a phrase are
    included), so scanning resumes at ``bounds.end``.

    Returns:
        ``(bounds, literal)``, or None when only spaces remain.
    """
    if normalizer is None:
        normalizer = _default_normalizer

    group_length = len(group)
    while start < group_length and group[start] == " ":
        start += 1
    if start >= group_length:
        return None

    next_space = group.find(" ", start)
    next_quote = group.find('"', start)
    is_phrase = False

    if next_quote < 0 or (0 <= next_space < next_quote):
        # Space comes before any quote: the literal ends there, or at the group end.
        end = next_space if next_space >= 0 else group_length
        length = end - start
    else:
        closing_quote = group.find('"', next_quote + 1)
        if group[start] != '"':
            # Quote lies ahead; stop before it so the next scan starts on it.
            length = next_quote - start
        elif closing_quote >= 0:
            is_phrase = True
            length = closing_quote + 1 - start
        else:
            # Unterminated quote: drop it and read a bare term.
            start += 1
            if next_space < 0:
                length = group_length - start
            else:
                length = next_space - start

    bounds = ScanBounds(start, length)
    if is_phrase:
        literal: QueryNode = PhraseLiteral(bounds.slice(group), normalizer=normalizer)
        return bounds, literal

    negated = False
    if length > 0 and group[start] == "-":
        negated = True
        bounds = ScanBounds(start + 1, length - 1)

    text = bounds.slice(group)
    if "*" in text:
        literal = WildcardLiteral(text, negated=negated, normalizer=normalizer)
    else:
        literal = TermLiteral(text, negated=negated, normalizer=normalizer)
    return bounds, literal


def _fold_group(group: str, normalizer: TermNormalizer) -> QueryNode | None:
    literals: list[QueryNode] = []
    position = 0
    while position < len(group):
        found = find_next_literal(group, position, normalizer)
        if found is None:
            break
        bounds, literal = found
        logger.debug("Literal %r at %d+%d -> %r", group, bounds.start, bounds.length, literal)
        literals.append(literal)
        position = bounds.end

    if not literals:
        return None
    if len(literals) == 1:
        return literals[0]
    return AndQuery(tuple(literals))


def parse_query(query: str, normalizer: TermNormalizer | None = None) -> QueryNode | None:
    """Parse a boolean query string into a query tree.

    Args:
        query: Raw query text.
        normalizer: Normalizer stored on every literal. Defaults to a shared
            ``BasicTermNormalizer``.

    Returns:
        The query tree, or None if the query holds no literal at all
        (empty, blank or separator-only input).

    Raises:
        QueryTypeError: If ``query`` is not a string.
    """
    if not isinstance(query, str):
        raise QueryTypeError(query)
    if normalizer is None:
        normalizer = _default_normalizer

    groups: list[QueryNode] = []
    position = 0
    while position < len(query):
        bounds = find_next_group(query, position)
        if bounds is None:
            break
        group = bounds.slice(query)
        logger.debug("Group %r at %d+%d", group, bounds.start, bounds.length)
        folded = _fold_group(group, normalizer)
        if folded is not None:
            groups.append(folded)
        position = bounds.end

    if not groups:
        logger.debug("Query %r has no literals", query)
        return None
    if len(groups) == 1:
        return groups[0]
    return OrQuery(tuple(groups))


class BooleanQueryParser:
    """Parser bound to one normalizer.

    Holds no scan state, so one instance can serve concurrent callers.
    """

    def __init__(self, normalizer: TermNormalizer | None = None) -> None:
        self.normalizer = normalizer if normalizer is not None else _default_normalizer

    def parse(self, query: str) -> QueryNode | None:
        return parse_query(query, self.normalizer)
