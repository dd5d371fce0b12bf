"""Identifier generation for persisted rows."""

from cuid2 import Cuid

CUID_LENGTH = 25

_cuid = Cuid(length=CUID_LENGTH)


def generate_cuid() -> str:
    """Return a new CUID2 string (lowercase, URL-safe, collision resistant)."""
    return _cuid.generate()
