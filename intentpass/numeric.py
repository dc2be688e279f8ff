"""Small numeric helpers shared across the analyzers."""

import math
from collections import Counter
from typing import Iterable


def shannon_entropy(text: str) -> float:
    """Shannon entropy (bits) of the character frequency distribution of ``text``."""
    if not text:
        return 0.0
    total = len(text)
    entropy = 0.0
    for count in Counter(text).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def distribution_entropy(counts: Iterable[int]) -> float:
    """Shannon entropy (bits) of an arbitrary count distribution; zero counts are skipped."""
    counts = [c for c in counts if c > 0]
    total = sum(counts)
    if total == 0:
        return 0.0
    entropy = 0.0
    for count in counts:
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves go up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
