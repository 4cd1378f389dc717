from __future__ import annotations

import random
from typing import Iterator, Optional

ADJECTIVES = ("Swift", "Noble", "Brave", "Bright", "Lucky", "Grand", "Wise", "Bold", "Epic", "Pure")
NOUNS = ("Sheep", "Wheat", "Wood", "Brick", "Stone", "Harbor", "Island", "Coast", "Trade", "Road")
FRIENDLY_NUMBER_DIGITS = 3


def hash_to_seed(text: str) -> int:
    """Return a stable non-negative seed for `text`.

    Rolling hash over UTF-16 code units, wrapped to a signed 32-bit integer
    after every step. Characters outside the Basic Multilingual Plane hash
    as their two surrogate code units.
    """
    value = 0
    for code_unit in _utf16_code_units(text):
        value = _to_int32((value << 5) - value + code_unit)
    return abs(value)


def random_friendly_name(rng: Optional[random.Random] = None) -> str:
    """Return a fresh name such as ``BraveWheat042``.

    Independent of any numeric seed; the returned text is meant to be hashed
    with `hash_to_seed` like any user supplied seed.
    """
    rng = rng if rng is not None else random.Random()
    adjective = rng.choice(ADJECTIVES)
    noun = rng.choice(NOUNS)
    number = rng.randrange(10**FRIENDLY_NUMBER_DIGITS)
    return f"{adjective}{noun}{number:0{FRIENDLY_NUMBER_DIGITS}d}"


def resolve_seed_text(seed_text: Optional[str], rng: Optional[random.Random] = None) -> str:
    if seed_text is None or not seed_text.strip():
        return random_friendly_name(rng)
    return seed_text


def _utf16_code_units(text: str) -> Iterator[int]:
    payload = text.encode("utf-16-le", "surrogatepass")
    for offset in range(0, len(payload), 2):
        yield int.from_bytes(payload[offset : offset + 2], "little")


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    if value & 0x80000000:
        return value - 0x100000000
    return value
