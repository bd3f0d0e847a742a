"""Unit tests for query tree rendering."""

from __future__ import annotations

import io
import json

from rich.console import Console
from rich.tree import Tree

from boolquery.query.parser import parse_query
from boolquery.query.render import format_query, to_dict, to_rich_tree
from boolquery.utils.output import THEME


def _render(tree: Tree) -> str:
    console = Console(theme=THEME, file=io.StringIO(), width=80, color_system=None)
    console.print(tree)
    return console.file.getvalue()


class TestToDict:
    def test_nested(self) -> None:
        assert to_dict(parse_query('cat "a b" + -dog*')) == {
            "kind": "or",
            "children": [
                {
                    "kind": "and",
                    "children": [
                        {"kind": "term", "text": "cat", "negated": False},
                        {"kind": "phrase", "text": '"a b"', "negated": False},
                    ],
                },
                {"kind": "wildcard", "text": "dog*", "negated": True},
            ],
        }

    def test_json_serializable(self) -> None:
        data = to_dict(parse_query("a + b c"))
        assert json.loads(json.dumps(data)) == data

    def test_empty(self) -> None:
        assert to_dict(None) is None


class TestFormatQuery:
    def test_canonical_spacing(self) -> None:
        assert format_query(parse_query("  -cat   dog ++ fish* ")) == "-cat dog + fish*"

    def test_empty(self) -> None:
        assert format_query(None) == ""


class TestRichTree:
    def test_labels(self) -> None:
        output = _render(to_rich_tree(parse_query("cat -dog")))
        assert "AND" in output
        assert "term cat" in output
        assert "NOT term dog" in output

    def test_phrase_markup_escaped(self) -> None:
        output = _render(to_rich_tree(parse_query('"[bold] x"')))
        assert 'phrase "[bold] x"' in output

    def test_empty(self) -> None:
        output = _render(to_rich_tree(None))
        assert "(empty query)" in output
