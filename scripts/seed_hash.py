#!/usr/bin/env python3
"""
Seed hashing for design selection.

Strings are hashed over their UTF-16 code units with a djb2 fold followed
by a 32-bit avalanche pass, so a domain maps to the same seed here as in
the site builder that renders it.
"""

from __future__ import annotations

from typing import Iterator


HASH_INIT = 5381
HASH_MULTIPLIER = 0x85EBCA6B

_MASK_32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


def _code_units(text: str) -> Iterator[int]:
    """Yield UTF-16 code units; astral characters become surrogate pairs."""
    raw = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def hash_string(text: str) -> int:
    """Hash ``text`` into a non-negative seed.

    Every intermediate is kept in signed 32-bit range. The result is the
    absolute value of the final signed word, so it lies in ``[0, 2**31]``.
    """
    acc = HASH_INIT
    for unit in _code_units(text):
        acc = _to_int32(acc * 33) ^ unit

    acc ^= (acc & _MASK_32) >> 16
    acc = _to_int32(acc * HASH_MULTIPLIER)
    acc ^= (acc & _MASK_32) >> 13
    return abs(_to_int32(acc))


def reverse_text(text: str) -> str:
    """Reverse ``text`` unit by unit, the way a UTF-16 string reverses."""
    raw = text.encode("utf-16-le", "surrogatepass")
    units = [raw[i:i + 2] for i in range(0, len(raw), 2)]
    return b"".join(reversed(units)).decode("utf-16-le", "surrogatepass")
