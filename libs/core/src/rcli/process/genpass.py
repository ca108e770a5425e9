from __future__ import annotations
import secrets

# No I, l or 0: they read like 1 and O.
UPPER = "ABCDEFGHJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijkmnopqrstuvwxyz"
NUMBER = "123456789"
SYMBOL = "~!@#$%^&*_"


def process_genpass(
    length: int = 16,
    upper: bool = True,
    lower: bool = True,
    number: bool = True,
    symbol: bool = True,
) -> str:
    """Random password with at least one character from every enabled class."""
    rng = secrets.SystemRandom()
    chars = ""
    password: list[str] = []
    for enabled, charset in ((upper, UPPER), (lower, LOWER), (number, NUMBER), (symbol, SYMBOL)):
        if enabled:
            chars += charset
            password.append(secrets.choice(charset))
    if not chars:
        raise ValueError("at least one character class must be enabled")
    if length < len(password):
        raise ValueError(f"length must be at least {len(password)} for the enabled character classes")

    password.extend(secrets.choice(chars) for _ in range(length - len(password)))
    rng.shuffle(password)
    return "".join(password)
