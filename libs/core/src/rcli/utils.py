from __future__ import annotations
"""Input routing and text encodings shared by the process functions."""

import base64
import binascii
import re
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Union

from .errors import FormatError

STDIN = "-"

_URLSAFE_RE = re.compile(rb"[A-Za-z0-9_-]*={0,2}")


@contextmanager
def get_reader(input: str) -> Iterator[BinaryIO]:
    """Yield a binary reader for ``input``; ``-`` selects standard input.

    Files are closed on exit, stdin is left open.
    """
    if input == STDIN:
        yield sys.stdin.buffer
        return
    with open(input, "rb") as fh:
        yield fh


def read_input(input: str) -> bytes:
    with get_reader(input) as reader:
        return reader.read()


def _as_bytes(text: Union[str, bytes]) -> bytes:
    if isinstance(text, str):
        try:
            return text.encode("ascii")
        except UnicodeEncodeError:
            raise FormatError("base64 input must be ASCII") from None
    return bytes(text)


def b64_encode(data: bytes) -> str:
    """URL-safe base64 without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64_decode(text: Union[str, bytes]) -> bytes:
    """Inverse of :func:`b64_encode`; tolerates whitespace and trailing padding."""
    raw = _as_bytes(text).strip()
    if not _URLSAFE_RE.fullmatch(raw):
        raise FormatError("invalid URL-safe base64 input")
    raw = raw.rstrip(b"=")
    try:
        return base64.urlsafe_b64decode(raw + b"=" * (-len(raw) % 4))
    except binascii.Error as exc:
        raise FormatError(f"invalid URL-safe base64 input: {exc}") from exc


def b64_encode_standard(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64_decode_standard(text: Union[str, bytes]) -> bytes:
    raw = _as_bytes(text).strip()
    try:
        return base64.b64decode(raw, validate=True)
    except binascii.Error as exc:
        raise FormatError(f"invalid base64 input: {exc}") from exc
