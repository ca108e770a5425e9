from __future__ import annotations
import os
from typing import BinaryIO, List

from Cryptodome.Cipher import ChaCha20_Poly1305

from rcli import registry
from rcli.errors import AuthenticationError, FormatError
from rcli.registry import DECRYPTOR, ENCRYPTOR, GENERATOR
from rcli.utils import b64_decode

KEY_LEN = 32
NONCE_LEN = 24
TAG_LEN = 16


@registry.register("xchacha20poly1305", ENCRYPTOR)
@registry.register("xchacha20poly1305", DECRYPTOR)
@registry.register("xchacha20poly1305", GENERATOR)
class XChaCha20Poly1305Key:
    """XChaCha20-Poly1305 with a self-describing envelope.

    ``encrypt`` returns ``nonce(24) || ciphertext || tag(16)`` so the nonce
    travels with the data; ``decrypt`` expects exactly that layout.
    PyCryptodome selects the XChaCha20 variant from the 24-byte nonce.
    """
    name = "xchacha20poly1305"

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LEN:
            raise FormatError(f"xchacha20poly1305 key must be {KEY_LEN} bytes, got {len(key)}")
        self._key = bytes(key)

    @property
    def key(self) -> bytes:
        return self._key

    @classmethod
    def try_new(cls, key: bytes) -> "XChaCha20Poly1305Key":
        return cls(key)

    @classmethod
    def load(cls, source) -> "XChaCha20Poly1305Key":
        """Load a base64 key from the file at ``source``, or from ``source`` itself.

        A string that happens to name an existing file is always read as a
        file; anything else is decoded as literal URL-safe base64 key text.
        """
        source = os.fspath(source)
        if os.path.isfile(source):
            with open(source, "rb") as fh:
                text = fh.read()
        else:
            text = source
        return cls.try_new(b64_decode(text))

    @classmethod
    def generate(cls) -> List[bytes]:
        return [os.urandom(KEY_LEN)]

    def encrypt(self, reader: BinaryIO) -> bytes:
        nonce = os.urandom(NONCE_LEN)
        cipher = ChaCha20_Poly1305.new(key=self._key, nonce=nonce)
        ciphertext, tag = cipher.encrypt_and_digest(reader.read())
        return nonce + ciphertext + tag

    def decrypt(self, reader: BinaryIO) -> bytes:
        envelope = reader.read()
        if len(envelope) < NONCE_LEN + TAG_LEN:
            raise FormatError(
                f"envelope must be at least {NONCE_LEN + TAG_LEN} bytes, got {len(envelope)}"
            )
        nonce = envelope[:NONCE_LEN]
        ciphertext, tag = envelope[NONCE_LEN:-TAG_LEN], envelope[-TAG_LEN:]
        cipher = ChaCha20_Poly1305.new(key=self._key, nonce=nonce)
        try:
            return cipher.decrypt_and_verify(ciphertext, tag)
        except ValueError:
            raise AuthenticationError("decryption failed: authentication tag mismatch") from None
