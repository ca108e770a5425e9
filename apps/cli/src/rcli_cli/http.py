from __future__ import annotations
from pathlib import Path
from typing import Optional

import typer

from rcli import config
from rcli.process.http_serve import process_http_serve
from .common import verify_path

app = typer.Typer(add_completion=False, help="HTTP server")


@app.command()
def serve(
    dir: Path = typer.Option(Path("."), "--dir", "-d", callback=verify_path, help="Directory to serve."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port (default: RCLI_HTTP_PORT or 8080)."),
) -> None:
    """Serve a directory over HTTP."""
    process_http_serve(dir, port if port is not None else config.http_port())
