from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from searchfox_api.config import get_default_repo
from searchfox_api.core.repos import Repo, resolve_repo
from searchfox_api.core.search import MIN_QUERY_LENGTH, SearchQuery, build_search_url

console = Console()


def _parse_query(value: str) -> str:
    if len(value) < MIN_QUERY_LENGTH:
        raise typer.BadParameter("Queries must be at least three characters.")
    return value


def _parse_repo(value: str | None) -> Repo:
    try:
        return resolve_repo(value if value is not None else get_default_repo())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def url(
    query: Annotated[str, typer.Argument(help="The search query, at least three characters.", callback=_parse_query)],
    repo: Annotated[
        str | None, typer.Option("--repo", help="Repository name or alias (see 'repos'). Defaults to SEARCHFOX_REPO.")
    ] = None,
    case_sensitive: Annotated[bool, typer.Option("--case-sensitive", help="Perform a case-sensitive search.")] = False,
    regex: Annotated[bool, typer.Option("--regex", help="Perform a regular expression search.")] = False,
    path: Annotated[str, typer.Option(help="A path to limit the query to.")] = "",
) -> None:
    """Print the Searchfox URL for a query."""
    repository = _parse_repo(repo)
    try:
        search = SearchQuery(
            query=query,
            repository=repository,
            case_sensitive=case_sensitive,
            regex=regex,
            path=path,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(build_search_url(search), soft_wrap=True, highlight=False)


def repos() -> None:
    """List the repositories Searchfox indexes and their aliases."""
    table = Table(show_lines=False)
    table.add_column("repository")
    table.add_column("aliases")
    for repository in Repo:
        table.add_row(repository.value, ", ".join(repository.aliases))
    console.print(table)
    console.print(f"({len(Repo)} repositories)")
