from __future__ import annotations
from typing import Dict, Any, Callable, Optional, Tuple

from .errors import UnsupportedSchemeError

# Capability names adapters register under.
SIGNER = "signer"
VERIFIER = "verifier"
GENERATOR = "generator"
ENCRYPTOR = "encryptor"
DECRYPTOR = "decryptor"

CAPABILITIES = (SIGNER, VERIFIER, GENERATOR, ENCRYPTOR, DECRYPTOR)


class _Registry:
    def __init__(self) -> None:
        self._items: Dict[Tuple[str, str], Any] = {}

    def register(self, name: str, capability: str) -> Callable[[Any], Any]:
        if capability not in CAPABILITIES:
            raise ValueError(f"unknown capability {capability!r}")

        def _inner(cls_or_obj: Any) -> Any:
            self._items[(name, capability)] = cls_or_obj
            return cls_or_obj
        return _inner

    def get(self, name: str, capability: str) -> Any:
        try:
            return self._items[(name, capability)]
        except KeyError:
            raise UnsupportedSchemeError(
                f"scheme {name!r} does not provide a {capability}"
            ) from None

    def list(self, capability: Optional[str] = None) -> Dict[str, Any]:
        """Registered schemes keyed by ``name`` or ``name:capability``."""
        if capability is not None:
            return {name: obj for (name, cap), obj in self._items.items() if cap == capability}
        return {f"{name}:{cap}": obj for (name, cap), obj in self._items.items()}

registry = _Registry()
