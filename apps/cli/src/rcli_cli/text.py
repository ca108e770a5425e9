from __future__ import annotations
from pathlib import Path

import typer

from rcli.formats import TextEncryptFormat, TextSignFormat
from rcli.process.text import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)
from rcli.utils import b64_encode
from .common import exit_on_error, verify_file, verify_output, verify_path, write_files

app = typer.Typer(add_completion=False, help="Text sign/verify and encrypt/decrypt")

KEY_FILE_NAMES = {
    TextSignFormat.BLAKE3: ("blake3.txt",),
    TextSignFormat.ED25519: ("ed25519.sk", "ed25519.pk"),
}
ENCRYPT_KEY_FILE = "xchacha20poly1305_k.txt"
ENCRYPT_TEXT_FILE = "xchacha20poly1305_t.txt"


@app.command()
def sign(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="Input file, '-' for stdin."),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file, help="Key file."),
    format: TextSignFormat = typer.Option(TextSignFormat.BLAKE3, "--format", case_sensitive=False),
) -> None:
    """Sign a message with a private/shared key."""
    with exit_on_error():
        sig = process_text_sign(input, key, format)
    typer.echo(sig)


@app.command()
def verify(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="Input file, '-' for stdin."),
    key: str = typer.Option(..., "--key", "-k", callback=verify_file, help="Key file."),
    format: TextSignFormat = typer.Option(TextSignFormat.BLAKE3, "--format", case_sensitive=False),
    sig: str = typer.Option(..., "--sig", "-s", help="Signature as URL-safe base64."),
) -> None:
    """Verify a signed message."""
    with exit_on_error():
        verified = process_text_verify(input, key, format, sig)
    typer.echo(str(verified).lower())


@app.command()
def generate(
    format: TextSignFormat = typer.Option(TextSignFormat.BLAKE3, "--format", case_sensitive=False),
    output: Path = typer.Option(..., "--output", "-o", callback=verify_path, help="Directory for the key files."),
) -> None:
    """Generate a new key."""
    with exit_on_error():
        keys = process_text_generate(format)
        write_files([(output / name, data) for name, data in zip(KEY_FILE_NAMES[format], keys)])
    for name in KEY_FILE_NAMES[format]:
        typer.echo(f"wrote {output / name}")


@app.command()
def encrypt(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="Input file, '-' for stdin."),
    key: str = typer.Option(
        "-",
        "--key",
        "-k",
        help="Key file or literal base64 key; an existing file path always wins. '-' generates a new key.",
    ),
    format: TextEncryptFormat = typer.Option(TextEncryptFormat.XCHACHA20POLY1305, "--format", case_sensitive=False),
    output: Path = typer.Option(
        Path("-"),
        "--output",
        "-o",
        callback=verify_output,
        help="Directory for key and ciphertext files, '-' for stdout.",
    ),
) -> None:
    """Encrypt input text with XChaCha20-Poly1305."""
    with exit_on_error():
        key_bytes, envelope = process_text_encrypt(input, key, format)
        encoded_key, encoded_text = b64_encode(key_bytes), b64_encode(envelope)
        if str(output) != "-":
            write_files(
                [
                    (output / ENCRYPT_KEY_FILE, encoded_key.encode("ascii")),
                    (output / ENCRYPT_TEXT_FILE, encoded_text.encode("ascii")),
                ]
            )
            typer.echo(f"wrote {output / ENCRYPT_KEY_FILE}")
            typer.echo(f"wrote {output / ENCRYPT_TEXT_FILE}")
            return
    typer.echo(f"key:{encoded_key}\ntext:{encoded_text}")


@app.command()
def decrypt(
    input: str = typer.Option("-", "--input", "-i", callback=verify_file, help="Base64 envelope file, '-' for stdin."),
    key: str = typer.Option(..., "--key", "-k", help="Key file or literal base64 key; an existing file path always wins."),
    format: TextEncryptFormat = typer.Option(TextEncryptFormat.XCHACHA20POLY1305, "--format", case_sensitive=False),
) -> None:
    """Decrypt input text."""
    with exit_on_error():
        decrypted = process_text_decrypt(input, key, format)
    typer.echo(decrypted, nl=False)
