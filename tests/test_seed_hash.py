#!/usr/bin/env python3
"""Tests for seed hashing."""

import pytest


def reference_hash(text: str) -> int:
    """Independent 32-bit rendition of djb2-xor plus avalanche."""
    units = []
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            units += [0xD800 + (cp >> 10), 0xDC00 + (cp & 0x3FF)]
        else:
            units.append(cp)

    h = 5381
    for unit in units:
        h = ((h * 33) & 0xFFFFFFFF) ^ unit
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & 0xFFFFFFFF
    h ^= h >> 13
    return 0x100000000 - h if h & 0x80000000 else h


KNOWN_HASHES = [
    ("", 181267782),
    ("a", 548090029),
    ("layout", 1660349218),
    ("example.com", 1119674576),
    ("example.co", 1016807376),
    ("moc.elpmaxe", 1112991452),
    ("example.comfree government phone", 61269003),
    ("free government phoneexample.com", 1887497377),
    ("superring.net", 1674213787),
    ("é✓", 347284130),
    ("a\U0001F600b", 658854371),
]


@pytest.mark.parametrize("text,expected", KNOWN_HASHES)
def test_hash_string_known_values(text, expected):
    from seed_hash import hash_string

    assert hash_string(text) == expected


@pytest.mark.parametrize("text", [t for t, _ in KNOWN_HASHES] + ["Free Government Phone", "x" * 500])
def test_hash_string_matches_reference(text):
    from seed_hash import hash_string

    assert hash_string(text) == reference_hash(text)


def test_hash_string_is_stable_and_non_negative():
    from seed_hash import hash_string

    samples = ["", "a", "example.com", "ZZZZZZZZZZZZZZZZ", "\u0000", "\uffff" * 10]
    for text in samples:
        value = hash_string(text)
        assert value == hash_string(text)
        assert 0 <= value <= 2 ** 31


def test_truncated_domains_do_not_collide():
    from seed_hash import hash_string

    pairs = [
        ("example.com", "example.co"),
        ("example.org", "example.or"),
        ("superring.net", "superring.ne"),
        ("phones.io", "phones.i"),
        ("freephone.us", "freephone.u"),
    ]
    for full, truncated in pairs:
        assert hash_string(full) != hash_string(truncated)


def test_adjacent_domains_spread_out():
    """Neighbouring inputs should not land on neighbouring seeds."""
    from seed_hash import hash_string

    values = [hash_string(f"site{i}.com") for i in range(50)]
    assert len(set(values)) == 50
    assert len({v % 50 for v in values}) > 20


def test_reverse_text_plain():
    from seed_hash import reverse_text

    assert reverse_text("example.com") == "moc.elpmaxe"
    assert reverse_text("") == ""


def test_reverse_text_swaps_surrogate_halves():
    from seed_hash import hash_string, reverse_text

    reversed_text = reverse_text("a\U0001F600b")
    assert reversed_text == "b\ude00\ud83da"
    assert hash_string(reversed_text) == 286873235
