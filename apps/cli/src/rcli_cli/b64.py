from __future__ import annotations
import typer

from rcli.formats import Base64Format
from rcli.process.b64 import process_decode, process_encode
from .common import exit_on_error, verify_file

app = typer.Typer(add_completion=False, help="Base64 encode/decode")


@app.command()
def encode(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file),
    format: Base64Format = typer.Option(Base64Format.STANDARD, "--format", case_sensitive=False),
) -> None:
    """Base64-encode the input."""
    with exit_on_error():
        encoded = process_encode(input, format)
    typer.echo(encoded)


@app.command()
def decode(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file),
    format: Base64Format = typer.Option(Base64Format.STANDARD, "--format", case_sensitive=False),
) -> None:
    """Decode base64 input; the decoded bytes are written as-is."""
    with exit_on_error():
        decoded = process_decode(input, format)
    typer.echo(decoded, nl=False)
