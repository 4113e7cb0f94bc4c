"""cssshrink CLI entry point: minify a stylesheet file or standard input."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from cssshrink import __version__
from cssshrink.model import MinifyOptions, SizeReport
from cssshrink.pipeline import minify


def _read_source(input_path: str) -> str:
    if input_path == "-":
        return click.get_text_stream("stdin").read()
    return Path(input_path).read_text(encoding="utf-8")


@click.command()
@click.version_option(version=__version__, prog_name="cssshrink")
@click.argument("input_path", metavar="[INPUT]", required=False)
@click.argument("output_path", metavar="[OUTPUT]", required=False)
@click.option("--no-values", is_flag=True, help="Skip value rewrites (colors, zeros, keywords)")
@click.option("--no-unquote", is_flag=True, help="Keep quotes in url() and attribute selectors")
@click.option("--no-shorthand", is_flag=True, help="Do not collapse margin/padding sides")
@click.option("--no-dedupe", is_flag=True, help="Keep shadowed duplicate declarations")
@click.option("--no-merge", is_flag=True, help="Do not merge adjacent identical rules")
@click.option("-v", "--verbose", is_flag=True, help="Log per-pass sizes to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    input_path: str | None,
    output_path: str | None,
    no_values: bool,
    no_unquote: bool,
    no_shorthand: bool,
    no_dedupe: bool,
    no_merge: bool,
    verbose: bool,
) -> None:
    """Minify a CSS file.

    INPUT is a path, or '-' to read standard input.  The result goes to
    OUTPUT when given (followed by a size report), otherwise to standard
    output.
    """
    if input_path is None:
        click.echo(ctx.get_usage(), err=True)
        click.echo("       cat input.css | cssshrink -", err=True)
        sys.exit(1)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = _read_source(input_path)
    except (OSError, UnicodeDecodeError) as exc:
        click.echo(f"Error: cannot read {input_path}: {exc}", err=True)
        sys.exit(1)

    options = MinifyOptions(
        optimize_values=not no_values,
        unquote_tokens=not no_unquote,
        collapse_shorthands=not no_shorthand,
        remove_duplicates=not no_dedupe,
        merge_rules=not no_merge,
    )
    minified = minify(source, options)

    if output_path is None:
        click.echo(minified, nl=False)
        return

    try:
        Path(output_path).write_text(minified, encoding="utf-8")
    except OSError as exc:
        click.echo(f"Error: cannot write {output_path}: {exc}", err=True)
        sys.exit(1)
    click.echo(str(SizeReport.measure(source, minified)))
