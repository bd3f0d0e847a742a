"""Query tree node types produced by the boolean query parser.

The tree is a closed union of five frozen dataclasses. Conjunctions and
disjunctions always hold at least two children; literals carry their raw
text, a negation flag and the normalizer used later to turn that text into
index terms.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import ClassVar

from boolquery.text.normalizer import BasicTermNormalizer, TermNormalizer

_WILDCARD_STRIP = re.compile(r"[^A-Za-z0-9*]")


class NodeKind(enum.Enum):
    """Declared kind of a query node, used by evaluators to pick a strategy."""

    AND = "and"
    OR = "or"
    TERM = "term"
    PHRASE = "phrase"
    WILDCARD = "wildcard"


def _check_children(node: AndQuery | OrQuery) -> None:
    children = tuple(node.children)
    if len(children) < 2:
        raise ValueError(
            f"{type(node).__name__} needs at least 2 children, got {len(children)}"
        )
    object.__setattr__(node, "children", children)


@dataclass(frozen=True)
class AndQuery:
    """Conjunction of two or more sub-queries, in query order."""

    kind: ClassVar[NodeKind] = NodeKind.AND

    children: tuple[QueryNode, ...]

    def __post_init__(self) -> None:
        _check_children(self)

    def __str__(self) -> str:
        return " ".join(str(child) for child in self.children)


@dataclass(frozen=True)
class OrQuery:
    """Disjunction of two or more sub-queries, in query order."""

    kind: ClassVar[NodeKind] = NodeKind.OR

    children: tuple[QueryNode, ...]

    def __post_init__(self) -> None:
        _check_children(self)

    def __str__(self) -> str:
        return " + ".join(str(child) for child in self.children)


@dataclass(frozen=True)
class _Literal:
    text: str
    negated: bool = False
    normalizer: TermNormalizer = field(
        default_factory=BasicTermNormalizer, compare=False, repr=False
    )

    def __str__(self) -> str:
        return f"-{self.text}" if self.negated else self.text


@dataclass(frozen=True)
class TermLiteral(_Literal):
    """A single word matched through the normalizer."""

    kind: ClassVar[NodeKind] = NodeKind.TERM

    def terms(self) -> list[str]:
        return self.normalizer.process_token(self.text)


@dataclass(frozen=True)
class PhraseLiteral(_Literal):
    """A quoted run of words matched as a contiguous sequence.

    ``text`` keeps the quote characters exactly as they appeared in the
    query; ``phrase_text`` is the part between them.
    """

    kind: ClassVar[NodeKind] = NodeKind.PHRASE

    @property
    def phrase_text(self) -> str:
        inner = self.text
        if inner.startswith('"'):
            inner = inner[1:]
        if inner.endswith('"'):
            inner = inner[:-1]
        return inner

    def terms(self) -> list[str]:
        """Normalize each whitespace-separated token of the phrase, in order."""
        terms: list[str] = []
        for token in self.phrase_text.split():
            terms.extend(self.normalizer.process_token(token))
        return terms


@dataclass(frozen=True)
class WildcardLiteral(_Literal):
    """A literal containing ``*``, expanded against the vocabulary."""

    kind: ClassVar[NodeKind] = NodeKind.WILDCARD

    def pattern(self) -> str:
        """Lowercased pattern keeping only ASCII letters, digits and ``*``."""
        return _WILDCARD_STRIP.sub("", self.text).lower()

    def fragments(self) -> list[str]:
        return [part for part in self.pattern().split("*") if part]


QueryNode = AndQuery | OrQuery | TermLiteral | PhraseLiteral | WildcardLiteral
