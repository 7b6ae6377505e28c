import logging
from typing import Annotated

import typer

from searchfox_api.cli.dump import dump
from searchfox_api.cli.url import repos, url
from searchfox_api.config import get_log_level

app = typer.Typer(
    name="searchfox-api",
    help="Searchfox API CLI — decode search responses and build search URLs.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log decoding details.")] = False,
) -> None:
    level = logging.DEBUG if verbose else get_log_level()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


app.command("dump")(dump)
app.command("url")(url)
app.command("repos")(repos)


def main() -> None:
    app()
