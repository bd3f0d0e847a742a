"""Parse a query and print its tree."""

from __future__ import annotations

import json

import click

from boolquery.context import Context, pass_context
from boolquery.config import Config
from boolquery.exceptions import BoolQueryError
from boolquery.query.parser import BooleanQueryParser
from boolquery.query.render import format_query, to_dict, to_rich_tree
from boolquery.utils.output import console, debug, error, info, verbose

EXIT_PARSE_ERROR = 1


@click.command("parse")
@click.argument("query")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["tree", "json", "text"]),
    default="tree",
    show_default=True,
    help="Output format",
)
@pass_context
def cli(ctx: Context, query: str, output_format: str) -> None:
    """Parse QUERY and show the resulting query tree.

    Literals separated by spaces are AND-ed, groups separated by '+'
    are OR-ed.

    Examples:

    \b
      # Rich tree view
      boolquery parse 'cat dog + "big fish"'

    \b
      # JSON for scripting
      boolquery parse --format json -- '-cat comp*'
    """
    config = ctx.config or Config()
    parser = BooleanQueryParser(config.build_normalizer())

    debug(f"Normalizer: {parser.normalizer!r}")
    try:
        tree = parser.parse(query)
    except BoolQueryError as e:
        error(str(e))
        raise SystemExit(EXIT_PARSE_ERROR) from e

    if output_format == "json":
        click.echo(json.dumps(to_dict(tree), indent=2))
        return

    if tree is None:
        if ctx.verbose or not ctx.quiet:
            info("Query contains no literals.")
        return

    if output_format == "text":
        click.echo(format_query(tree))
        return

    verbose(f"Canonical form: {format_query(tree)}")
    console.print(to_rich_tree(tree))
