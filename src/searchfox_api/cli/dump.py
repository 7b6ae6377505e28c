import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from searchfox_api.core.response import SECTIONS, decode_response
from searchfox_api.errors import DecodeError
from searchfox_api.models import FileMatches, FuzzyMatches, Matches, Response

console = Console()


def _read_payload(payload: str) -> bytes:
    if payload == "-":
        return sys.stdin.buffer.read()
    return Path(payload).read_bytes()


def _add_file_matches(parent: Tree, file_matches: FileMatches) -> None:
    for path, lines in file_matches.items():
        file_node = parent.add(f"[cyan]{escape(path)}[/cyan]")
        for match in lines:
            start, end = match.bounds
            label = f"[dim]{match.number}[/dim] {escape(match.line)} [dim]({start}-{end})[/dim]"
            match_node = file_node.add(label)
            if match.context is not None:
                match_node.add(f"[magenta]in {escape(match.context.context)}[/magenta]")
            if match.peek_lines is not None:
                match_node.add(escape(match.peek_lines.rstrip("\n")))


def _add_fuzzy_matches(parent: Tree, label: str, fuzzy: FuzzyMatches) -> None:
    for name, file_matches in fuzzy.items():
        _add_file_matches(parent.add(f"[bold]{label} ({escape(name)})[/bold]"), file_matches)


def _add_section(parent: Tree, name: str, matches: Matches) -> None:
    section = parent.add(f"[bold green]{name}[/bold green]")
    if matches.files:
        files = section.add("[bold]Files[/bold]")
        for path in matches.files:
            files.add(f"[cyan]{escape(path)}[/cyan]")
    if matches.text_matches:
        _add_file_matches(section.add("[bold]Textual Occurrences[/bold]"), matches.text_matches)
    _add_fuzzy_matches(section, "Definitions", matches.definitions)
    _add_fuzzy_matches(section, "Declarations", matches.declarations)
    _add_fuzzy_matches(section, "Uses", matches.uses)


def render_tree(response: Response) -> Tree:
    timeout = " [yellow](timed out, results incomplete)[/yellow]" if response.timedout else ""
    tree = Tree(f"[bold]{escape(response.title)}[/bold]{timeout}")
    for name in SECTIONS:
        matches = getattr(response, name)
        if matches is not None:
            _add_section(tree, name, matches)
    return tree


def _count_lines(file_matches: FileMatches) -> int:
    return sum(len(lines) for lines in file_matches.values())


def _count_fuzzy(fuzzy: FuzzyMatches) -> int:
    return sum(_count_lines(file_matches) for file_matches in fuzzy.values())


def render_summary(response: Response) -> Table:
    table = Table(title=escape(response.title), show_lines=False)
    for header in ("section", "files", "text", "definitions", "declarations", "uses"):
        table.add_column(header)
    for name in SECTIONS:
        matches = getattr(response, name)
        if matches is None:
            continue
        table.add_row(
            name,
            str(len(matches.files)),
            str(_count_lines(matches.text_matches)),
            str(_count_fuzzy(matches.definitions)),
            str(_count_fuzzy(matches.declarations)),
            str(_count_fuzzy(matches.uses)),
        )
    return table


def dump(
    payload: Annotated[str, typer.Argument(help="Saved JSON response, or '-' for stdin.")] = "-",
    summary: Annotated[bool, typer.Option(help="Print match counts per section instead of every match.")] = False,
) -> None:
    """Decode a Searchfox search response and print it."""
    try:
        raw = _read_payload(payload)
    except OSError as exc:
        console.print(f"[red]Could not read {escape(payload)}: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    try:
        response = decode_response(raw)
    except DecodeError as exc:
        console.print(f"[red]Could not decode response: {escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    if summary:
        console.print(render_summary(response))
        if response.timedout:
            console.print("[yellow]The search timed out; results are incomplete.[/yellow]")
    else:
        console.print(render_tree(response))
