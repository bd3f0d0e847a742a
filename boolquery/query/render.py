"""Render query trees for display and serialization."""

from __future__ import annotations

from typing import Any

from rich.markup import escape
from rich.tree import Tree

from boolquery.query.ast_nodes import AndQuery, OrQuery, QueryNode

_KIND_STYLES: dict[str, str] = {
    "and": "query.and",
    "or": "query.or",
    "term": "query.term",
    "phrase": "query.phrase",
    "wildcard": "query.wildcard",
}


def to_dict(node: QueryNode | None) -> dict[str, Any] | None:
    """Convert a query tree into JSON-serializable nested dicts."""
    if node is None:
        return None
    if isinstance(node, (AndQuery, OrQuery)):
        return {
            "kind": node.kind.value,
            "children": [to_dict(child) for child in node.children],
        }
    return {"kind": node.kind.value, "text": node.text, "negated": node.negated}


def format_query(node: QueryNode | None) -> str:
    """Render a query tree back to query syntax."""
    if node is None:
        return ""
    return str(node)


def _label(node: QueryNode) -> str:
    kind = node.kind.value
    style = _KIND_STYLES[kind]
    if isinstance(node, (AndQuery, OrQuery)):
        return f"[{style}]{kind.upper()}[/{style}]"
    label = f"[{style}]{kind}[/{style}] {escape(node.text)}"
    if node.negated:
        label = f"[query.not]NOT[/query.not] {label}"
    return label


def _add_children(tree: Tree, node: QueryNode) -> None:
    if isinstance(node, (AndQuery, OrQuery)):
        for child in node.children:
            _add_children(tree.add(_label(child)), child)


def to_rich_tree(node: QueryNode | None) -> Tree:
    """Build a rich Tree for terminal display."""
    if node is None:
        return Tree("[info](empty query)[/info]")
    tree = Tree(_label(node))
    _add_children(tree, node)
    return tree
