"""Adapter package for the built-in text schemes.

Importing submodules triggers registration of adapters.
We don't re-export class names; callers go through the registry.
"""

# Trigger registration side-effects
from . import blake3_adapter as _blake3_adapter  # noqa: F401
from . import ed25519_adapter as _ed25519_adapter  # noqa: F401
from . import xchacha_adapter as _xchacha_adapter  # noqa: F401

__all__: list[str] = []
