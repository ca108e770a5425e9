from __future__ import annotations
from pathlib import Path
from typing import BinaryIO, List

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from rcli import registry
from rcli.errors import FormatError
from rcli.registry import GENERATOR, SIGNER, VERIFIER

SECRET_KEY_LEN = 32
PUBLIC_KEY_LEN = 32
SIGNATURE_LEN = 64


def _private_bytes(sk: Ed25519PrivateKey) -> bytes:
    return sk.private_bytes(
        serialization.Encoding.Raw,
        serialization.PrivateFormat.Raw,
        serialization.NoEncryption(),
    )


def _public_bytes(pk: Ed25519PublicKey) -> bytes:
    return pk.public_bytes(
        serialization.Encoding.Raw,
        serialization.PublicFormat.Raw,
    )


@registry.register("ed25519", SIGNER)
@registry.register("ed25519", GENERATOR)
class Ed25519Signer:
    """Ed25519 signing with a raw 32-byte seed (RFC 8032 secret key)."""
    name = "ed25519"

    def __init__(self, key: Ed25519PrivateKey) -> None:
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Signer":
        if len(key) != SECRET_KEY_LEN:
            raise FormatError(f"ed25519 secret key must be {SECRET_KEY_LEN} bytes, got {len(key)}")
        return cls(Ed25519PrivateKey.from_private_bytes(key))

    @classmethod
    def load(cls, path) -> "Ed25519Signer":
        return cls.try_new(Path(path).read_bytes())

    @classmethod
    def generate(cls) -> List[bytes]:
        sk = Ed25519PrivateKey.generate()
        return [_private_bytes(sk), _public_bytes(sk.public_key())]

    def verifying_key(self) -> "Ed25519Verifier":
        return Ed25519Verifier(self._key.public_key())

    def sign(self, reader: BinaryIO) -> bytes:
        return self._key.sign(reader.read())


@registry.register("ed25519", VERIFIER)
class Ed25519Verifier:
    name = "ed25519"

    def __init__(self, key: Ed25519PublicKey) -> None:
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Verifier":
        if len(key) != PUBLIC_KEY_LEN:
            raise FormatError(f"ed25519 public key must be {PUBLIC_KEY_LEN} bytes, got {len(key)}")
        try:
            return cls(Ed25519PublicKey.from_public_bytes(key))
        except ValueError as exc:
            raise FormatError(f"invalid ed25519 public key: {exc}") from exc

    @classmethod
    def load(cls, path) -> "Ed25519Verifier":
        return cls.try_new(Path(path).read_bytes())

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        if len(sig) != SIGNATURE_LEN:
            raise FormatError(f"ed25519 signature must be {SIGNATURE_LEN} bytes, got {len(sig)}")
        data = reader.read()
        try:
            self._key.verify(bytes(sig), data)
            return True
        except InvalidSignature:
            return False
