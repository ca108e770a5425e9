from .b64 import process_decode, process_encode
from .csv_convert import process_csv
from .genpass import process_genpass
from .http_serve import process_http_serve
from .jwt_token import process_jwt_sign, process_jwt_verify
from .text import (
    process_text_decrypt,
    process_text_encrypt,
    process_text_generate,
    process_text_sign,
    process_text_verify,
)

__all__ = [
    "process_encode",
    "process_decode",
    "process_csv",
    "process_genpass",
    "process_http_serve",
    "process_jwt_sign",
    "process_jwt_verify",
    "process_text_sign",
    "process_text_verify",
    "process_text_generate",
    "process_text_encrypt",
    "process_text_decrypt",
]
