"""CLI main entry point for kana conversion."""

import logging
import sys

import click
from rich.console import Console

from .. import __version__
from ..core import KanaError, Transliteration, describe_text
from .formatters import (
    CONVERSION_FIELDS,
    format_conversion_json,
    format_conversion_plain,
    format_conversion_table,
    format_kind_json,
    format_kind_table,
    format_repl_result,
)

console = Console()
error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Japanese Kana - Convert text between hiragana, katakana and romaji."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command()
@click.argument("text")
@click.option(
    "--to",
    "-t",
    "target",
    type=click.Choice(["hiragana", "katakana", "romaji", "all"]),
    default="all",
    help="Target script",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json", "plain"]),
    default="table",
    help="Output format",
)
def convert(text: str, target: str, output_format: str) -> None:
    """Convert TEXT to hiragana, katakana and/or romaji.

    Examples:
        jp-kana convert "konnichiha"
        jp-kana convert "カタカナ" --to romaji --format plain
        jp-kana convert "ひらがな" --format json
    """
    targets = CONVERSION_FIELDS if target == "all" else (target,)
    try:
        result = Transliteration.from_text(text)
    except KanaError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    if output_format == "json":
        click.echo(format_conversion_json(result, targets))
    elif output_format == "plain":
        click.echo(format_conversion_plain(result, targets))
    else:
        format_conversion_table(result, targets)


@cli.command()
@click.argument("text")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
def kind(text: str, output_format: str) -> None:
    """Show the character kind of every character in TEXT.

    Examples:
        jp-kana kind "漢字とカナ"
        jp-kana kind "ｶﾀｶﾅ" --format json
    """
    infos = describe_text(text)
    if output_format == "json":
        click.echo(format_kind_json(infos))
    else:
        format_kind_table(infos)


@cli.command()
@click.option("--prompt", "-p", default=">> ", help="Input prompt")
def repl(prompt: str) -> None:
    """Interactively convert lines of text until end of input or Ctrl-C."""
    console.print(
        "\nType strings to translate between hiragana, katakana and romaji:\n"
    )
    while True:
        try:
            line = console.input(prompt, markup=False)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        try:
            format_repl_result(Transliteration.from_text(line))
        except KanaError as e:
            error_console.print(f"[red]Error:[/red] {e}")
            sys.exit(1)


if __name__ == "__main__":
    cli()
