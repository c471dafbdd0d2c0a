"""
Opaque tokens for scoping SVG filters to one box instance.
Uses secrets so ids don't collide across boxes rendered on the same page.
"""
import secrets
import string

_BASE36 = string.digits + string.ascii_lowercase

FILTER_PREFIX = "noise-filter-"
TOKEN_LENGTH = 9


def base36_token(length: int = TOKEN_LENGTH) -> str:
    """Random lowercase base-36 string."""
    return "".join(secrets.choice(_BASE36) for _ in range(max(1, length)))


def filter_token(prefix: str = FILTER_PREFIX) -> str:
    """Fresh filter id, e.g. noise-filter-k3j9x0a2m. Carries no meaning beyond uniqueness."""
    return f"{prefix}{base36_token()}"
