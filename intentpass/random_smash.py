"""
intentpass.random_smash

Flag unstructured keyboard mashing: unnatural vowel ratio combined with
little vowel/consonant alternation. The resulting score is a penalty, so
genuinely random strings are penalised as well as mashed ones.
"""

import re

from .constants import CONSONANTS, KEYBOARD_LAYOUT, THRESHOLDS, VOWELS
from .models import RandomSmashAnalysis

_ALNUM = re.compile(r"[a-z0-9]")

# vowel share of ordinary English text, used as the neutral point
_NEUTRAL_VOWEL_RATIO = 0.4


def vowel_ratio(password: str) -> float:
    vowels = sum(1 for c in password if c in VOWELS)
    consonants = sum(1 for c in password if c in CONSONANTS)
    total = vowels + consonants
    if total == 0:
        return 0.5
    return vowels / total


def pronounceability(password: str) -> float:
    """
    Vowel/consonant alternations divided by the number of letters seen.
    Non-letters are skipped without resetting the previous letter.
    """
    alternations = 0
    letters = 0
    prev_vowel = False
    for c in password:
        if c in VOWELS:
            is_vowel = True
        elif c in CONSONANTS:
            is_vowel = False
        else:
            continue
        if letters > 0 and is_vowel != prev_vowel:
            alternations += 1
        prev_vowel = is_vowel
        letters += 1
    if letters == 0:
        return 0.5
    return min(alternations / letters, 1.0)


def adjacency_randomness(password: str) -> float:
    """
    Share of consecutive alphanumeric pairs that sit next to each other on
    the keyboard. Higher means more adjacent, i.e. less random.
    """
    lower = password.lower()
    adjacent = 0
    total = 0
    for char, nxt in zip(lower, lower[1:]):
        if char in KEYBOARD_LAYOUT and _ALNUM.match(char) and _ALNUM.match(nxt):
            total += 1
            if nxt in KEYBOARD_LAYOUT[char]:
                adjacent += 1
    if total == 0:
        return 0.5
    return adjacent / total


def analyze_random_smash(password: str) -> RandomSmashAnalysis:
    ratio = vowel_ratio(password)
    pron = pronounceability(password)
    adjacency = adjacency_randomness(password)

    unnatural_ratio = ratio < THRESHOLDS["vowel_ratio_low"] or ratio > THRESHOLDS["vowel_ratio_high"]
    is_smash = unnatural_ratio and pron < THRESHOLDS["pronounceability_threshold"]

    score = (abs(ratio - _NEUTRAL_VOWEL_RATIO) + (1 - pron)) / 2

    return RandomSmashAnalysis(
        vowel_to_consonant_ratio=ratio,
        pronounceability=pron,
        adjacency_randomness=adjacency,
        is_random_smash=is_smash,
        random_smash_score=min(score, 1.0),
    )
