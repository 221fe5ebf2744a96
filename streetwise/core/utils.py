import math
import re

_LISTING_SLUG = re.compile(r"building/([^/?#]+)")
_CITY_SUFFIX = re.compile(r"[-_]new[-_]york$")

def normalize_address(addr: str) -> str:
    """
    Minimal cleanup before dispatch:
    - trim whitespace
    - collapse multiple spaces
    Case is preserved; the provider echoes it back in logs.
    """
    return " ".join(addr.strip().split())

def address_from_listing_url(url: str) -> str | None:
    """
    Turn a StreetEasy building URL into a searchable address.
    e.g. https://streeteasy.com/building/41-5-avenue-new_york/1f -> "41 5 avenue"
    """
    m = _LISTING_SLUG.search(url or "")
    if not m:
        return None
    slug = _CITY_SUFFIX.sub("", m.group(1))
    address = " ".join(slug.replace("-", " ").replace("_", " ").split())
    return address or None

def round_half_up(x: float) -> int:
    """0.5 always rounds away from zero (Python's round() is banker's)."""
    return int(math.floor(abs(x) + 0.5)) * (1 if x >= 0 else -1)

def clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, x))

def fnv1a_32(s: str) -> int:
    """Deterministic, fast hash for seed generation."""
    h = 0x811c9dc5
    for c in s.encode("utf-8"):
        h ^= c
        h = (h * 0x01000193) & 0xFFFFFFFF
    return h

def seeded_rand(seed: int, n: int = 1) -> list[float]:
    """
    Stateless pseudo-random generator (Mulberry32-like) so
    same seed → same outputs without storing PRNG state.
    """
    out = []
    t = (seed + 0x6D2B79F5) & 0xFFFFFFFF
    for _ in range(n):
        t = (t ^ (t >> 15)) * (t | 1) & 0xFFFFFFFF
        t ^= t + ((t ^ (t >> 7)) * (t | 61) & 0xFFFFFFFF)
        r = ((t ^ (t >> 14)) & 0xFFFFFFFF) / 4294967296.0
        out.append(r)
    return out
