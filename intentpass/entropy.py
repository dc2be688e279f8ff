"""
intentpass.entropy

Entropy analysis:
- detect_repetition(password): runs of one character longer than the allowed maximum
- character_class_distribution(password): upper/lower/digit/symbol tallies
- balance_score(distribution): class-distribution entropy normalised to [0, 1]
- entropy_value(password): per-character Shannon entropy normalised to [0, 1]
"""

import math
from typing import List, Tuple

from .constants import PRINTABLE_CHARSET_SIZE, THRESHOLDS
from .models import CharacterClassDistribution, EntropyAnalysis
from .numeric import clamp, distribution_entropy, shannon_entropy


def detect_repetition(password: str) -> Tuple[bool, List[str]]:
    """
    Record every run of an identical character longer than
    ``max_consecutive_repetition`` as ``"<run> (<n>x)"``. Scanning resumes
    after each recorded run.
    """
    max_allowed = THRESHOLDS["max_consecutive_repetition"]
    patterns: List[str] = []
    n = len(password)
    i = 0
    while i < n:
        run = 1
        while i + run < n and password[i + run] == password[i]:
            run += 1
        if run > max_allowed:
            patterns.append(f"{password[i] * run} ({run}x)")
            i += run
        else:
            i += 1
    return bool(patterns), patterns


def character_class_distribution(password: str) -> CharacterClassDistribution:
    uppercase = lowercase = digits = symbols = 0
    for c in password:
        if "A" <= c <= "Z":
            uppercase += 1
        elif "a" <= c <= "z":
            lowercase += 1
        elif "0" <= c <= "9":
            digits += 1
        else:
            symbols += 1
    return CharacterClassDistribution(
        uppercase=uppercase, lowercase=lowercase, digits=digits, symbols=symbols
    )


def balance_score(distribution: CharacterClassDistribution) -> float:
    """Entropy of the 4-class distribution divided by log2(4); 1.0 is a perfect split."""
    entropy = distribution_entropy(
        (distribution.uppercase, distribution.lowercase, distribution.digits, distribution.symbols)
    )
    return clamp(entropy / 2.0, 0.0, 1.0)


def entropy_value(password: str) -> float:
    """
    Per-character Shannon entropy over log2(min(length, 94)).
    Passwords shorter than two characters have no spread to measure and score 0.
    """
    max_entropy = math.log2(min(len(password), PRINTABLE_CHARSET_SIZE)) if password else 0.0
    if max_entropy <= 0:
        return 0.0
    return clamp(shannon_entropy(password) / max_entropy, 0.0, 1.0)


def analyze_entropy(password: str) -> EntropyAnalysis:
    has_repetition, patterns = detect_repetition(password)
    distribution = character_class_distribution(password)
    return EntropyAnalysis(
        has_consecutive_repetition=has_repetition,
        repetition_patterns=patterns,
        character_class_distribution=distribution,
        balance_score=balance_score(distribution),
        entropy_value=entropy_value(password),
    )
