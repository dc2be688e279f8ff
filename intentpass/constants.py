"""
intentpass.constants

Static lookup tables and thresholds shared by the analyzers. Nothing in here
is mutated at runtime.
"""

from typing import Dict, FrozenSet, List, Tuple

# small built-in list of common passwords / word fragments (offline)
WEAK_SUBSTRINGS: Tuple[str, ...] = (
    "password",
    "admin",
    "welcome",
    "login",
    "user",
    "pass",
    "pwd",
    "test",
    "123456",
    "12345",
    "1234",
    "qwerty",
    "abc",
    "letmein",
    "monkey",
    "dragon",
    "master",
    "sunshine",
    "princess",
    "football",
)

# named keyboard runs, checked as plain substrings of the lowercased password
KEYBOARD_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "qwerty": ("qwerty", "werty", "ertyu", "rtyui", "tyuiop", "yuiop", "uiop"),
    "asdf": ("asdf", "asdfgh", "sdfgh", "dfgh", "fghjkl", "ghjkl", "hjkl"),
    "zxcv": ("zxcv", "xcvbn", "cvbn", "vbn"),
    "vertical": ("12345", "23456", "34567", "45678", "56789"),
    "diagonals": ("1qaz", "2wsx", "3edc", "4rfv", "5tgb", "6yhn", "7ujm"),
}

CONFUSABLE_CHARS: Dict[str, Tuple[str, ...]] = {
    "1": ("l", "I", "L"),
    "0": ("O", "o"),
    "l": ("1", "I", "L"),
    "I": ("1", "l", "L"),
    "O": ("0", "o"),
}

VOWELS: FrozenSet[str] = frozenset("aeiouAEIOU")
CONSONANTS: FrozenSet[str] = frozenset("bcdfghjklmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ")

# symbol sets used by the composition checks
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"
COMPOSITION_SYMBOLS = "!@#$%^&*()_+-=[]{};:'\",.<>?"

# weights of each component in the overall score (points out of 100)
SCORE_WEIGHTS: Dict[str, float] = {
    "structural_coherence": 25,
    "predictability_penalty": 25,
    "random_smash_penalty": 20,
    "entropy_balance": 20,
    "visual_ambiguity": 10,
}

THRESHOLDS: Dict[str, float] = {
    "min_sequence_length": 3,
    "min_weak_substring_length": 4,
    "min_keyboard_pattern_length": 3,
    "max_consecutive_repetition": 2,
    "vowel_ratio_low": 0.15,
    "vowel_ratio_high": 0.5,
    "pronounceability_threshold": 0.3,
    "balance_strength": 0.6,
    "ambiguity_warning_ratio": 0.2,
    "short_length": 8,
}

# lower bound of each intentionality category on the [-1, 1] index
INTENTIONALITY_RANGES: Dict[str, Tuple[float, float]] = {
    "structured": (0.5, 1.0),
    "hack": (0.0, 0.5),
    "chaotic": (-1.0, 0.0),
}

# printable ASCII ceiling for the normalised entropy value
PRINTABLE_CHARSET_SIZE = 94

# QWERTY adjacency graph
KEYBOARD_LAYOUT: Dict[str, List[str]] = {
    "1": ["2", "q"],
    "2": ["1", "3", "q", "w", "e"],
    "3": ["2", "4", "w", "e", "r"],
    "4": ["3", "5", "e", "r", "t"],
    "5": ["4", "6", "r", "t", "y"],
    "6": ["5", "7", "t", "y", "u"],
    "7": ["6", "8", "y", "u", "i"],
    "8": ["7", "9", "u", "i", "o"],
    "9": ["8", "0", "i", "o", "p"],
    "0": ["9", "o", "p"],
    "q": ["1", "2", "w", "a"],
    "w": ["2", "3", "q", "e", "a", "s", "d"],
    "e": ["3", "4", "w", "r", "s", "d", "f"],
    "r": ["4", "5", "e", "t", "d", "f", "g"],
    "t": ["5", "6", "r", "y", "f", "g", "h"],
    "y": ["6", "7", "t", "u", "g", "h", "j"],
    "u": ["7", "8", "y", "i", "h", "j", "k"],
    "i": ["8", "9", "u", "o", "j", "k", "l"],
    "o": ["9", "0", "i", "p", "k", "l"],
    "p": ["0", "o", "l"],
    "a": ["q", "w", "s", "z"],
    "s": ["w", "e", "a", "d", "z", "x", "c"],
    "d": ["e", "r", "s", "f", "x", "c", "v"],
    "f": ["r", "t", "d", "g", "c", "v", "b"],
    "g": ["t", "y", "f", "h", "v", "b", "n"],
    "h": ["y", "u", "g", "j", "b", "n", "m"],
    "j": ["u", "i", "h", "k", "n", "m"],
    "k": ["i", "o", "j", "l", "m"],
    "l": ["o", "p", "k"],
    "z": ["a", "s", "x"],
    "x": ["s", "d", "z", "c"],
    "c": ["d", "f", "x", "v"],
    "v": ["f", "g", "c", "b"],
    "b": ["g", "h", "v", "n"],
    "n": ["h", "j", "b", "m"],
    "m": ["j", "k", "n"],
}
