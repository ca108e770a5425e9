"""Capability contracts implemented by scheme adapters.

Adapters implement a subset of these Protocols and register themselves into
the global registry, one entry per capability. The orchestration layer and the
CLI talk only to these interfaces, never to the crypto libraries directly.
"""
from __future__ import annotations

import os
from typing import BinaryIO, List, Protocol, TypeVar, Union

PathLike = Union[str, "os.PathLike[str]"]
T = TypeVar("T")


class Signer(Protocol):
    """Produce a signature over everything readable from ``reader``."""
    name: str
    def sign(self, reader: BinaryIO) -> bytes: ...


class Verifier(Protocol):
    """Check a signature; a mismatch is ``False``, never an exception."""
    name: str
    def verify(self, reader: BinaryIO, sig: bytes) -> bool: ...


class KeyLoader(Protocol):
    @classmethod
    def load(cls: type[T], source: PathLike) -> T: ...


class KeyGenerator(Protocol):
    """Fresh key material: one block for symmetric keys, secret then public otherwise."""
    @classmethod
    def generate(cls) -> List[bytes]: ...


class Encryptor(Protocol):
    name: str
    def encrypt(self, reader: BinaryIO) -> bytes: ...


class Decryptor(Protocol):
    name: str
    def decrypt(self, reader: BinaryIO) -> bytes: ...
