from __future__ import annotations
"""Text sign/verify/generate/encrypt/decrypt orchestration.

Each function resolves its scheme tag to a registered adapter once, loads (or
generates) key material, routes the input stream through the adapter and
returns raw bytes or URL-safe base64 text.
"""

import importlib
import importlib.util
import io
import logging
from typing import Any, List, Union

from rcli.formats import TextEncryptFormat, TextSignFormat
from rcli.registry import (
    DECRYPTOR,
    ENCRYPTOR,
    GENERATOR,
    SIGNER,
    VERIFIER,
    registry,
)
from rcli.utils import b64_decode, b64_encode, get_reader, read_input

log = logging.getLogger(__name__)

_ADAPTER_MODULES = ("rcli_schemes",)


def _load_adapters() -> None:
    for mod in _ADAPTER_MODULES:
        if importlib.util.find_spec(mod) is None:
            log.warning("adapter package %s not installed", mod)
            continue
        importlib.import_module(mod)


def _resolve(format: Any, capability: str) -> Any:
    _load_adapters()
    cls = registry.get(format.value, capability)
    log.debug("resolved %s %s -> %s", format.value, capability, cls.__name__)
    return cls


def process_text_sign(input: str, key: str, format: Union[str, TextSignFormat]) -> str:
    format = TextSignFormat.parse(format)
    signer = _resolve(format, SIGNER).load(key)
    with get_reader(input) as reader:
        signed = signer.sign(reader)
    return b64_encode(signed)


def process_text_verify(
    input: str,
    key: str,
    format: Union[str, TextSignFormat],
    sig: str,
) -> bool:
    format = TextSignFormat.parse(format)
    signature = b64_decode(sig)
    verifier = _resolve(format, VERIFIER).load(key)
    with get_reader(input) as reader:
        return verifier.verify(reader, signature)


def process_text_generate(format: Union[str, TextSignFormat, TextEncryptFormat]) -> List[bytes]:
    if not isinstance(format, (TextSignFormat, TextEncryptFormat)):
        try:
            format = TextSignFormat.parse(format)
        except ValueError:
            format = TextEncryptFormat.parse(format)
    return _resolve(format, GENERATOR).generate()


def process_text_encrypt(
    input: str,
    key: str,
    format: Union[str, TextEncryptFormat] = TextEncryptFormat.XCHACHA20POLY1305,
) -> List[bytes]:
    """Encrypt ``input``; returns ``[key, envelope]`` as raw bytes.

    ``key`` of ``-`` or empty generates a fresh key, which the caller must
    persist to decrypt later.
    """
    format = TextEncryptFormat.parse(format)
    cls = _resolve(format, ENCRYPTOR)
    if key and key != "-":
        encryptor = cls.load(key)
    else:
        log.info("Generate a new key for encrypting")
        encryptor = cls.try_new(cls.generate()[0])
    with get_reader(input) as reader:
        encrypted = encryptor.encrypt(reader)
    return [encryptor.key, encrypted]


def process_text_decrypt(
    input: str,
    key: str,
    format: Union[str, TextEncryptFormat] = TextEncryptFormat.XCHACHA20POLY1305,
) -> bytes:
    """Decrypt a base64 envelope read from ``input``."""
    format = TextEncryptFormat.parse(format)
    decryptor = _resolve(format, DECRYPTOR).load(key)
    envelope = b64_decode(read_input(input))
    return decryptor.decrypt(io.BytesIO(envelope))
