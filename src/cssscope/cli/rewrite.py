"""CLI command: cssscope rewrite -- prefix the scope blocks of a CSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssscope.config import ScopeConfig
from cssscope.parser import ParseError
from cssscope.scope import extract_and_rewrite


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout",
)
@click.option(
    "--strict-comments",
    is_flag=True,
    help="Fail on comments that are never closed",
)
@click.option(
    "--nested-at-rule",
    "nested_at_rules",
    multiple=True,
    help="Extra at-rule whose body is prefixed too (@media always is)",
)
def rewrite(
    cssfile: str,
    output: str | None,
    strict_comments: bool,
    nested_at_rules: tuple[str, ...],
) -> None:
    """Rewrite the SCOPE blocks of an already combined CSS file."""
    config = ScopeConfig(
        nested_at_rules=tuple(dict.fromkeys(ScopeConfig.nested_at_rules + nested_at_rules)),
        strict_comments=strict_comments,
    )
    css_path = Path(cssfile)

    try:
        source = css_path.read_text(encoding="utf-8")
        result = extract_and_rewrite(source, config)
    except ParseError as exc:
        click.echo(f"Parse error: {css_path.name}: {exc}", err=True)
        sys.exit(1)

    if output:
        Path(output).write_text(result, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result, nl=False)
