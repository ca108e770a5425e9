from __future__ import annotations
from typing import Union

from rcli.formats import Base64Format
from rcli.utils import (
    b64_decode,
    b64_decode_standard,
    b64_encode,
    b64_encode_standard,
    read_input,
)


def process_encode(input: str, format: Union[str, Base64Format] = Base64Format.STANDARD) -> str:
    data = read_input(input)
    if Base64Format.parse(format) is Base64Format.URLSAFE:
        return b64_encode(data)
    return b64_encode_standard(data)


def process_decode(input: str, format: Union[str, Base64Format] = Base64Format.STANDARD) -> bytes:
    # Surrounding whitespace (a trailing newline from `echo`) is ignored.
    text = read_input(input)
    if Base64Format.parse(format) is Base64Format.URLSAFE:
        return b64_decode(text)
    return b64_decode_standard(text)
