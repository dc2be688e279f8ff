"""
intentpass.predictability

Pattern detectors:
- detect_alphabetical_sequences(password): windows whose char codes step by +1 ('abc', 'xyz')
- detect_numeric_sequences(password): the same rule over digits only ('123')
- detect_keyboard_patterns(password): named keyboard runs plus adjacency walks
- detect_weak_substrings(password): common passwords / words (4+ chars)
- analyze_predictability(password): all four, with a 0.25-per-category score
"""

from typing import List

from .constants import KEYBOARD_LAYOUT, KEYBOARD_PATTERNS, THRESHOLDS, WEAK_SUBSTRINGS
from .models import PredictabilityAnalysis

_SEQ_LEN = int(THRESHOLDS["min_sequence_length"])
_WALK_LEN = int(THRESHOLDS["min_keyboard_pattern_length"])


def detect_alphabetical_sequences(password: str, min_len: int = _SEQ_LEN) -> List[str]:
    """
    Return every window of ``min_len`` characters whose codes increase by
    exactly one per step. Overlapping windows are all reported
    ('abcd' -> ['abc', 'bcd']).
    """
    n = min_len
    sequences = []
    for i in range(len(password) - n + 1):
        first = ord(password[i])
        if all(ord(password[i + k]) == first + k for k in range(1, n)):
            sequences.append(password[i:i + n])
    return sequences


def detect_numeric_sequences(password: str, min_len: int = _SEQ_LEN) -> List[str]:
    """Ascending digit windows such as '123' or '789'."""
    n = min_len
    sequences = []
    for i in range(len(password) - n + 1):
        window = password[i:i + n]
        if not all("0" <= c <= "9" for c in window):
            continue
        first = int(window[0])
        if all(int(window[k]) == first + k for k in range(1, n)):
            sequences.append(window)
    return sequences


def _is_adjacent_walk(window: str) -> bool:
    for prev, nxt in zip(window, window[1:]):
        neighbours = KEYBOARD_LAYOUT.get(prev)
        if neighbours is None or nxt not in neighbours:
            return False
    return True


def detect_keyboard_patterns(password: str, min_len: int = _WALK_LEN) -> List[str]:
    """
    Detect usage of keyboard runs (qwerty, asdf, zxcv, number row, diagonals)
    and any window where each key is adjacent to the one before it.
    Results keep first-seen order without duplicates.
    """
    n = min_len
    lower = password.lower()
    found = []

    for patterns in KEYBOARD_PATTERNS.values():
        for pattern in patterns:
            if len(pattern) >= n and pattern in lower:
                found.append(pattern)

    for i in range(len(lower) - n + 1):
        window = lower[i:i + n]
        if _is_adjacent_walk(window):
            found.append(window)

    return list(dict.fromkeys(found))  # unique-preserve-order


def detect_weak_substrings(password: str) -> List[str]:
    min_len = THRESHOLDS["min_weak_substring_length"]
    lower = password.lower()
    return [weak for weak in WEAK_SUBSTRINGS if len(weak) >= min_len and weak in lower]


def analyze_predictability(password: str) -> PredictabilityAnalysis:
    alphabetical = detect_alphabetical_sequences(password)
    numeric = detect_numeric_sequences(password)
    keyboard = detect_keyboard_patterns(password)
    weak = detect_weak_substrings(password)

    flags = [bool(alphabetical), bool(numeric), bool(keyboard), bool(weak)]
    score = min(0.25 * sum(flags), 1.0)

    return PredictabilityAnalysis(
        has_alphabetical_sequence=flags[0],
        alphabetical_sequences=alphabetical,
        has_numeric_sequence=flags[1],
        numeric_sequences=numeric,
        has_keyboard_pattern=flags[2],
        keyboard_patterns=keyboard,
        has_weak_substring=flags[3],
        weak_substrings=weak,
        predictability_score=score,
    )
