"""Boolean query parsing into query trees."""

from boolquery.query.ast_nodes import (
    AndQuery,
    NodeKind,
    OrQuery,
    PhraseLiteral,
    QueryNode,
    TermLiteral,
    WildcardLiteral,
)
from boolquery.query.parser import (
    BooleanQueryParser,
    ScanBounds,
    find_next_group,
    find_next_literal,
    parse_query,
)
from boolquery.query.render import format_query, to_dict, to_rich_tree

__all__ = [
    "AndQuery",
    "BooleanQueryParser",
    "NodeKind",
    "OrQuery",
    "PhraseLiteral",
    "QueryNode",
    "ScanBounds",
    "TermLiteral",
    "WildcardLiteral",
    "find_next_group",
    "find_next_literal",
    "format_query",
    "parse_query",
    "to_dict",
    "to_rich_tree",
]
