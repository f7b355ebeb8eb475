"""Output formatters for CLI display."""

import json

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..core.models import CharInfo, Transliteration

console = Console()

CONVERSION_FIELDS = ("hiragana", "katakana", "romaji")


def format_conversion_table(
    result: Transliteration, targets: tuple[str, ...] = CONVERSION_FIELDS
) -> None:
    """Display a transliteration as a rich table."""
    table = Table(
        title=f"Conversion: {escape(result.text)}",
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("Script", style="cyan", no_wrap=True)
    table.add_column("Text", style="green")

    for target in targets:
        table.add_row(target.capitalize(), escape(getattr(result, target)))

    console.print(table)


def format_conversion_plain(
    result: Transliteration, targets: tuple[str, ...] = CONVERSION_FIELDS
) -> str:
    """Format a transliteration as bare lines, one per target script."""
    return "\n".join(getattr(result, target) for target in targets)


def format_conversion_json(
    result: Transliteration, targets: tuple[str, ...] = CONVERSION_FIELDS
) -> str:
    """Format a transliteration as JSON."""
    data = result.model_dump(include={"text", *targets})
    return json.dumps(data, ensure_ascii=False, indent=2)


def format_repl_result(result: Transliteration) -> None:
    """Display one interactive conversion."""
    text = f"""[bold]Input:[/bold]    {escape(result.text)}
[bold]Hiragana:[/bold] {escape(result.hiragana)}
[bold]Katakana:[/bold] {escape(result.katakana)}
[bold]Romaji:[/bold]   {escape(result.romaji)}"""

    console.print(Panel(text, border_style="blue"))


def format_kind_table(infos: list[CharInfo]) -> None:
    """Display character kinds as a table."""
    if not infos:
        console.print("No characters.")
        return

    table = Table(title="Characters", show_header=True, header_style="bold magenta")
    table.add_column("Char", style="cyan", no_wrap=True)
    table.add_column("Code point", style="blue", no_wrap=True)
    table.add_column("Kind", style="green")

    for info in infos:
        table.add_row(escape(info.char), info.codepoint, str(info.kind))

    console.print(table)


def format_kind_json(infos: list[CharInfo]) -> str:
    """Format character kinds as JSON."""
    data = [info.model_dump(mode="json") for info in infos]
    return json.dumps(data, ensure_ascii=False, indent=2)
