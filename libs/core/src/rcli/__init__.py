
from .interfaces import Decryptor, Encryptor, KeyGenerator, KeyLoader, Signer, Verifier
from .registry import registry
from .errors import AuthenticationError, FormatError, RcliError, UnsupportedSchemeError
from .formats import Base64Format, OutputFormat, TextEncryptFormat, TextSignFormat

__all__ = [
    "Signer",
    "Verifier",
    "KeyLoader",
    "KeyGenerator",
    "Encryptor",
    "Decryptor",
    "registry",
    "RcliError",
    "FormatError",
    "UnsupportedSchemeError",
    "AuthenticationError",
    "TextSignFormat",
    "TextEncryptFormat",
    "Base64Format",
    "OutputFormat",
]
