"""boolquery: parse boolean query syntax into query trees."""

from boolquery.query.ast_nodes import (
    AndQuery,
    NodeKind,
    OrQuery,
    PhraseLiteral,
    QueryNode,
    TermLiteral,
    WildcardLiteral,
)
from boolquery.query.parser import BooleanQueryParser, parse_query
from boolquery.text.normalizer import BasicTermNormalizer, TermNormalizer

__version__ = "0.1.0"

__all__ = [
    "AndQuery",
    "BasicTermNormalizer",
    "BooleanQueryParser",
    "NodeKind",
    "OrQuery",
    "PhraseLiteral",
    "QueryNode",
    "TermLiteral",
    "TermNormalizer",
    "WildcardLiteral",
    "__version__",
    "parse_query",
]
