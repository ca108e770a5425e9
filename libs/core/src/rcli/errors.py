from __future__ import annotations


class RcliError(Exception):
    pass


class FormatError(RcliError, ValueError):
    """Key, signature, envelope or encoding has the wrong shape."""


class UnsupportedSchemeError(FormatError):
    """No adapter registered for the requested scheme/capability pair."""


class AuthenticationError(RcliError):
    """Authenticated data (AEAD tag, token signature) did not check out."""


# Process exit statuses used by the CLI (sysexits.h values).
EXIT_FORMAT = 65
EXIT_IO = 74
EXIT_AUTH = 77
