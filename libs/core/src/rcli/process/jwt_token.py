from __future__ import annotations
import re
import time
from typing import Any, Dict, Optional

import jwt

from rcli.config import jwt_secret
from rcli.errors import AuthenticationError

JWT_ALGORITHM = "HS256"

_DURATION_RE = re.compile(r"(?P<days>\d+)d(?P<hours>\d+)h(?P<minutes>\d+)m")


def parse_expiry(value: str, now: Optional[float] = None) -> int:
    """Turn a relative duration such as ``1d4h0m`` into an absolute UNIX timestamp."""
    match = _DURATION_RE.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"Invalid exp format {value!r}, expected <days>d<hours>h<minutes>m")
    seconds = (
        int(match["days"]) * 86400
        + int(match["hours"]) * 3600
        + int(match["minutes"]) * 60
    )
    base = time.time() if now is None else now
    return int(base) + seconds


def process_jwt_sign(sub: str, aud: str, exp: int) -> str:
    claims = {"sub": sub, "aud": aud, "exp": exp}
    return jwt.encode(claims, jwt_secret(), algorithm=JWT_ALGORITHM)


def process_jwt_verify(token: str, aud: str) -> Dict[str, Any]:
    """Return the token's claims; any rejection raises AuthenticationError."""
    try:
        return jwt.decode(
            token,
            jwt_secret(),
            algorithms=[JWT_ALGORITHM],
            audience=aud,
            options={"require": ["exp", "sub", "aud"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthenticationError("token has expired") from exc
    except jwt.InvalidAudienceError as exc:
        raise AuthenticationError(f"token audience does not match {aud!r}") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError(f"invalid token: {exc}") from exc
