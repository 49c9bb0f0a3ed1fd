"""Command line front end for the link converter."""

import json

import typer
from rich.console import Console
from rich.table import Table

from affilink.config.settings import Settings
from affilink.conversion.exceptions import ConversionError
from affilink.conversion.factory import ConverterFactory
from affilink.logging.logger import Log

app = typer.Typer(no_args_is_help=True, help="Turn Amazon links into clean affiliate links.")

_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def _configure() -> None:
    Log.configure(Settings().log_level)


@app.command()
def convert(
    url: str = typer.Argument(..., help="Amazon link to convert."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Convert one Amazon link into an affiliate link."""
    converter = ConverterFactory.create(Settings())
    try:
        result = converter.convert(url)
    except ConversionError as exc:
        Log.warning(f"Conversion failed: {exc}")
        _err_console.print(f"[red]{exc}[/red]", highlight=False)
        raise typer.Exit(code=1) from exc

    Log.info(f"Converted link ({result.kind})")
    if as_json:
        typer.echo(json.dumps(result.to_dict()))
        return
    style = "green" if result.kind == "clean" else "yellow"
    _console.print(f"[{style}]{result.label}[/{style}]", highlight=False)
    typer.echo(result.url)


@app.command("show-config")
def show_config() -> None:
    """Show the effective conversion settings."""
    config = ConverterFactory.build_config(Settings())

    table = Table(title="affilink")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Affiliate tag", config.affiliate_tag)
    table.add_row("Tracking params", str(len(config.tracking_params)))
    suffixes = config.tracking_param_suffix_count
    table.add_row("Suffix variants", f"0-{suffixes - 1}" if suffixes else "none")
    _console.print(table)
