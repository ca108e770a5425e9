from __future__ import annotations
import json

import typer

from rcli.process.jwt_token import parse_expiry, process_jwt_sign, process_jwt_verify
from .common import exit_on_error

app = typer.Typer(add_completion=False, help="JWT sign/verify")


@app.command()
def sign(
    sub: str = typer.Option(..., "--sub", help="Subject (whom the token refers to)."),
    aud: str = typer.Option(..., "--aud", help="Audience."),
    exp: str = typer.Option(..., "--exp", help="Expiry from now, e.g. 1d4h0m."),
) -> None:
    """Sign a JWT (JSON Web Token)."""
    try:
        expires_at = parse_expiry(exp)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--exp'")
    token = process_jwt_sign(sub, aud, expires_at)
    typer.echo(f"token:{token}")


@app.command()
def verify(
    token: str = typer.Option(..., "--token", "-t", help="JWT to verify."),
    aud: str = typer.Option(..., "--aud", "-a", help="Expected audience."),
) -> None:
    """Verify a JWT."""
    with exit_on_error():
        claims = process_jwt_verify(token, aud)
    typer.echo(f"token data:{json.dumps(claims, sort_keys=True)}")
    typer.echo("true")
