"""Day 4: The Ideal Stocking Stuffer - mine MD5 hashes with leading zeros."""

from __future__ import annotations

import hashlib
from itertools import count

_COUNTER_LIMIT = 2**32


def has_leading_zeros(digest: bytes, zeros: int) -> bool:
    """Whether the digest's hexadecimal form starts with ``zeros`` zero nibbles."""
    return digest.hex().startswith("0" * zeros)


def mine(secret: str, zeros: int = 5) -> int:
    """Return the lowest counter whose MD5 of ``secret + counter`` has the zeros."""
    prefix = secret.encode()
    for counter in count():
        if counter >= _COUNTER_LIMIT:
            raise OverflowError("no matching counter below 2**32")
        digest = hashlib.md5(prefix + str(counter).encode()).digest()
        if has_leading_zeros(digest, zeros):
            return counter
    raise AssertionError("unreachable")