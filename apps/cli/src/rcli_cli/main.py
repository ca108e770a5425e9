from __future__ import annotations
from typing import Optional

import typer

from rcli.formats import OutputFormat
from rcli.process.csv_convert import process_csv
from rcli.process.genpass import process_genpass
from rcli.process.text import _load_adapters
from rcli.registry import CAPABILITIES, registry
from . import b64, http, jwt, text
from .common import configure_logging, exit_on_error, verify_input_file

app = typer.Typer(add_completion=False, help="rcli: text signing, encryption and small format utilities")
app.add_typer(text.app, name="text")
app.add_typer(b64.app, name="base64")
app.add_typer(http.app, name="http")
app.add_typer(jwt.app, name="jwt")


@app.callback()
def main(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="-v for INFO, -vv for DEBUG logging."),
) -> None:
    configure_logging(verbose)


@app.command()
def schemes():
    """List registered text schemes and their capabilities."""
    _load_adapters()
    for capability in CAPABILITIES:
        for name in registry.list(capability).keys():
            typer.echo(f"- {name}: {capability}")


@app.command()
def genpass(
    length: int = typer.Option(16, "--length", "-l", min=1, max=255),
    uppercase: bool = typer.Option(True, "--uppercase/--no-uppercase"),
    lowercase: bool = typer.Option(True, "--lowercase/--no-lowercase"),
    number: bool = typer.Option(True, "--number/--no-number"),
    symbol: bool = typer.Option(True, "--symbol/--no-symbol"),
) -> None:
    """Generate a random password."""
    try:
        password = process_genpass(length, uppercase, lowercase, number, symbol)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    typer.echo(password)


@app.command("csv")
def csv_command(
    input: str = typer.Option(..., "--input", "-i", callback=verify_input_file),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Defaults to output.<format>."),
    format: OutputFormat = typer.Option(OutputFormat.JSON, "--format", case_sensitive=False),
    delimiter: str = typer.Option(",", "--delimiter", "-d"),
    header: bool = typer.Option(True, "--header/--no-header"),
) -> None:
    """Show CSV, or convert CSV to other formats."""
    if len(delimiter) != 1:
        raise typer.BadParameter("delimiter must be a single character", param_hint="'--delimiter'")
    with exit_on_error():
        target = process_csv(input, output, format, delimiter, header)
    typer.echo(f"wrote {target}")


def app_main():
    app()

if __name__ == "__main__":
    app_main()
