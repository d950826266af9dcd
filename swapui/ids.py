"""Unpredictable identifiers for addressable markup regions.

Identifiers double as DOM anchors that a page script could otherwise guess,
so they are always drawn from a cryptographically strong byte source. The
source is injectable so tests can supply a seeded one.
"""
from __future__ import annotations

import secrets
import string
from dataclasses import dataclass, field
from typing import Callable

from .config import MIN_ID_LENGTH, IdConfig
from .errors import IdGenerationError

EntropySource = Callable[[int], bytes]

_ALPHABET = string.ascii_letters + string.digits
# Largest multiple of the alphabet size below 256; bytes at or above it are
# discarded so every character is equally likely.
_ACCEPT_BELOW = 256 - (256 % len(_ALPHABET))
_MAX_DRAWS = 16


def generate_id(
    entropy: EntropySource = secrets.token_bytes,
    *,
    length: int = 15,
    prefix: str = "i",
) -> str:
    """Return ``prefix`` followed by ``length`` random alphanumeric characters."""

    if length < MIN_ID_LENGTH:
        raise IdGenerationError(
            f"identifier length {length} is below the minimum of {MIN_ID_LENGTH}"
        )
    chars: list[str] = []
    draws = 0
    while len(chars) < length:
        if draws == _MAX_DRAWS:
            raise IdGenerationError("entropy source did not yield enough usable bytes")
        draws += 1
        chunk = entropy(length - len(chars) + 4)
        for byte in chunk:
            if byte >= _ACCEPT_BELOW:
                continue
            chars.append(_ALPHABET[byte % len(_ALPHABET)])
            if len(chars) == length:
                break
    if len(set(chars)) == 1:
        raise IdGenerationError("entropy source produced a degenerate identifier")
    return prefix + "".join(chars)


@dataclass(frozen=True, slots=True)
class IdSource:
    """Stateless identifier factory bound to a prefix, length and byte source."""

    prefix: str = "i"
    length: int = 15
    entropy: EntropySource = field(default=secrets.token_bytes, repr=False, compare=False)

    def __call__(self) -> str:
        return generate_id(self.entropy, length=self.length, prefix=self.prefix)

    @classmethod
    def from_config(cls, config: IdConfig, entropy: EntropySource = secrets.token_bytes) -> IdSource:
        return cls(prefix=config.prefix, length=config.length, entropy=entropy)


DEFAULT_ID_SOURCE = IdSource()


def make_id() -> str:
    return DEFAULT_ID_SOURCE()


__all__ = [
    "DEFAULT_ID_SOURCE",
    "EntropySource",
    "IdSource",
    "generate_id",
    "make_id",
]
