from __future__ import annotations
import hmac
from pathlib import Path
from typing import BinaryIO, List

from blake3 import blake3

from rcli import registry
from rcli.errors import FormatError
from rcli.process.genpass import process_genpass
from rcli.registry import GENERATOR, SIGNER, VERIFIER

KEY_LEN = 32


@registry.register("blake3", SIGNER)
@registry.register("blake3", VERIFIER)
@registry.register("blake3", GENERATOR)
class Blake3:
    """Keyed BLAKE3 used as a MAC: the same 32-byte key signs and verifies."""
    name = "blake3"
    digest_size = 32

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LEN:
            raise FormatError(f"blake3 key must be {KEY_LEN} bytes, got {len(key)}")
        self._key = bytes(key)

    @classmethod
    def try_new(cls, key: bytes) -> "Blake3":
        # Key files may carry trailing bytes such as a newline.
        if len(key) < KEY_LEN:
            raise FormatError(f"blake3 key must be at least {KEY_LEN} bytes, got {len(key)}")
        return cls(key[:KEY_LEN])

    @classmethod
    def load(cls, path) -> "Blake3":
        return cls.try_new(Path(path).read_bytes())

    @classmethod
    def generate(cls) -> List[bytes]:
        key = process_genpass(KEY_LEN, True, True, True, True)
        return [key.encode("ascii")]

    def _digest(self, data: bytes) -> bytes:
        return blake3(data, key=self._key).digest(length=self.digest_size)

    def sign(self, reader: BinaryIO) -> bytes:
        return self._digest(reader.read())

    def verify(self, reader: BinaryIO, sig: bytes) -> bool:
        return hmac.compare_digest(self._digest(reader.read()), bytes(sig))
