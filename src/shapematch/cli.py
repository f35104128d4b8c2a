from __future__ import annotations
import json
import logging
from typing import Optional

import typer
from rich import print as rprint
from rich.markup import escape

from .config import LOG_LEVELS, load_config
from .errors import ShapeError
from .loader import load_document, resolve_shape

app = typer.Typer(add_completion=False)
state = {"aliases": {}}


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides the configured level")):
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level")
    try:
        settings = load_config()
    except ShapeError as e:
        rprint(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(2)
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format='[%(asctime)s] %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )
    state["aliases"] = settings.shapes


@app.command()
def check(document: str, shape: str = typer.Option(..., "-s", "--shape", help="module:attribute or a configured alias")):
    try:
        value = load_document(document)
        matcher = resolve_shape(shape, state["aliases"])
    except ShapeError as e:
        rprint(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(2)
    if matcher.matches(value):
        rprint("[green]OK[/green]")
        return
    for message in matcher.last_non_matches():
        rprint(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


@app.command()
def show(shape: str):
    try:
        matcher = resolve_shape(shape, state["aliases"])
    except ShapeError as e:
        rprint(f"[red]{escape(e.message)}[/red]")
        raise typer.Exit(2)
    print(json.dumps(matcher.printable_shape, indent=2))
