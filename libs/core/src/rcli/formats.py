from __future__ import annotations
from enum import Enum
from typing import Type, TypeVar, Union

from .errors import FormatError

"""Closed sets of scheme tags.

Call sites dispatch on these enums only; free-form strings are parsed once at
the edge with :meth:`_Format.parse`.
"""

F = TypeVar("F", bound="_Format")


class _Format(str, Enum):
    @classmethod
    def parse(cls: Type[F], value: Union[str, F]) -> F:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise FormatError(f"Invalid {cls.__name__} {value!r}") from None

    def __str__(self) -> str:
        return self.value


class TextSignFormat(_Format):
    BLAKE3 = "blake3"
    ED25519 = "ed25519"


class TextEncryptFormat(_Format):
    XCHACHA20POLY1305 = "xchacha20poly1305"


class Base64Format(_Format):
    STANDARD = "standard"
    URLSAFE = "urlsafe"


class OutputFormat(_Format):
    JSON = "json"
    YAML = "yaml"
