"""
intentpass.adversarial

Estimate resistance (0-100) to five attack models and combine them with a
weakest-link rule:

- dictionary attack     common words / mostly-alphabetic input
- brute force           charset^length search at 1e9 guesses per second
- keyboard walk         number of detected keyboard patterns
- frequency analysis    per-character entropy spread
- markov chain          number of detected sequences
"""

import math
import re
import sys
from typing import List, Tuple

from .constants import COMPOSITION_SYMBOLS
from .models import AdversarialAnalysis, AttackScenario, PasswordAnalysisResult
from .numeric import clamp, round_half_up, shannon_entropy

ATTEMPTS_PER_SECOND = 1_000_000_000
COMMON_PASSWORD_LIST_SIZE = 50_000

DICTIONARY_WORDS = ("password", "admin", "letmein", "welcome", "monkey", "dragon", "123456")

_SYMBOL = re.compile("[" + re.escape(COMPOSITION_SYMBOLS) + "]")

_MINUTE = 60
_HOUR = 3600
_DAY = 86400
_YEAR = 31_536_000

# float range ends near 2**1024
_MAX_FLOAT_BITS = 1000


def estimate_time(possibilities: float, attempts_per_second: float = ATTEMPTS_PER_SECOND) -> Tuple[str, float]:
    """
    Average time to hit the answer (half the space) as a human readable
    string plus the raw number of seconds.
    """
    seconds = possibilities / 2 / attempts_per_second

    if seconds < 1:
        return "Less than 1 second", 0.0
    if seconds < _MINUTE:
        return f"{round_half_up(seconds)} seconds", seconds
    if seconds < _HOUR:
        return f"{round_half_up(seconds / _MINUTE)} minutes", seconds
    if seconds < _DAY:
        return f"{round_half_up(seconds / _HOUR)} hours", seconds
    if seconds < _YEAR:
        return f"{round_half_up(seconds / _DAY)} days", seconds

    years = seconds / _YEAR
    if years < 1_000:
        return f"{round_half_up(years)} years", seconds
    if years < 1_000_000:
        return f"{round_half_up(years / 1_000)}k years", seconds
    if years < 1_000_000_000:
        return f"{round_half_up(years / 1_000_000)}M years", seconds
    # capped at the largest finite float
    return "Infeasible (10B+ years)", min(seconds, sys.float_info.max)


def estimate_charset_size(password: str) -> int:
    size = 0
    if re.search(r"[a-z]", password):
        size += 26
    if re.search(r"[A-Z]", password):
        size += 26
    if re.search(r"[0-9]", password):
        size += 10
    if _SYMBOL.search(password):
        size += 32
    return max(26, size)


def brute_force_space(charset_size: int, length: int) -> float:
    """charset_size ** length as a float, ``inf`` once it leaves float range."""
    if length * math.log2(charset_size) > _MAX_FLOAT_BITS:
        return math.inf
    return float(charset_size ** length)


def dictionary_resistance(password: str) -> int:
    lower = password.lower()
    if any(word in lower for word in DICTIONARY_WORDS):
        return 30

    alpha = len(re.findall(r"[a-zA-Z]", password))
    if password and alpha / len(password) > 0.9:
        return 50

    resistance = 80
    if not re.search(r"[0-9]", password):
        resistance -= 15
    if not _SYMBOL.search(password):
        resistance -= 10
    return max(50, resistance)


def frequency_resistance(password: str) -> float:
    """Character-frequency entropy over log2(min(length, 26)), kept within [40, 95]."""
    max_entropy = math.log2(min(len(password), 26)) if password else 0.0
    normalized = shannon_entropy(password) / max_entropy * 100 if max_entropy > 0 else 0.0
    return clamp(normalized, 40, 95)


def _percent(value: float) -> int:
    return int(clamp(round_half_up(value), 0, 100))


def analyze_adversarial(password: str, analysis: PasswordAnalysisResult) -> AdversarialAnalysis:
    length = len(password)
    entropy = analysis.entropy.entropy_value
    pred = analysis.predictability

    # Dictionary
    dictionary = _percent(dictionary_resistance(password))
    dictionary_time, dictionary_seconds = estimate_time(dictionary, COMMON_PASSWORD_LIST_SIZE)

    # Brute force
    charset = estimate_charset_size(password)
    brute = _percent(min(99.0, entropy / 128 * 100))
    brute_time, brute_seconds = estimate_time(brute_force_space(charset, length))

    # Keyboard walks
    walk_count = len(pred.keyboard_patterns)
    walk = _percent(max(20, 100 - walk_count * 15))
    walk_time, walk_seconds = estimate_time(5_000)

    # Frequency analysis
    frequency = _percent(frequency_resistance(password))

    # Markov chain
    sequence_count = len(pred.alphabetical_sequences) + len(pred.numeric_sequences)
    markov = _percent(max(15, 100 - sequence_count * 20))
    markov_time, markov_seconds = estimate_time(50_000)

    if dictionary > 80:
        dictionary_note = "Strong resistance from non-dictionary words."
    else:
        dictionary_note = "Contains dictionary words or common patterns."
    if walk_count > 0:
        walk_note = f"Contains {walk_count} potential walks."
    else:
        walk_note = "No obvious keyboard walks detected."
    if frequency > 70:
        frequency_note = "Good character distribution."
    else:
        frequency_note = "Some characters dominate the password."
    if sequence_count > 0:
        markov_note = f"Contains {sequence_count} sequential patterns that reduce resistance."
    else:
        markov_note = "No obvious sequential patterns."

    return AdversarialAnalysis(
        dictionary_attack=AttackScenario(
            name="Dictionary Attack",
            description="Testing against common passwords and word lists",
            resistance_percentage=dictionary,
            estimated_time=dictionary_time,
            time_in_seconds=dictionary_seconds,
            explanation=f"Your password has {dictionary}% resistance to dictionary attacks. {dictionary_note}",
        ),
        brute_force=AttackScenario(
            name="Brute Force Attack",
            description="Testing every possible character combination",
            resistance_percentage=brute,
            estimated_time=brute_time,
            time_in_seconds=brute_seconds,
            explanation=(
                f"Estimated {brute_time} to crack by brute force with 1B attempts/second. "
                f"Length ({length}) and character set diversity contribute to this resistance."
            ),
        ),
        keyboard_walk_attack=AttackScenario(
            name="Keyboard Walk Attack",
            description="Testing adjacent key patterns (qwerty, asdf, etc.)",
            resistance_percentage=walk,
            estimated_time=walk_time,
            time_in_seconds=walk_seconds,
            explanation=f"Your password has {walk}% resistance to keyboard walk attacks. {walk_note}",
        ),
        frequency_analysis=AttackScenario(
            name="Frequency Analysis",
            description="Testing based on character frequency patterns",
            resistance_percentage=frequency,
            estimated_time="Variable",
            time_in_seconds=0.0,
            explanation=f"Your password has {frequency}% resistance to frequency analysis. {frequency_note}",
        ),
        markov_chain=AttackScenario(
            name="Markov Chain Attack",
            description="Testing predictive patterns and sequences",
            resistance_percentage=markov,
            estimated_time=markov_time,
            time_in_seconds=markov_seconds,
            explanation=f"Your password has {markov}% resistance to Markov chain attacks. {markov_note}",
        ),
        overall_resistance=min(dictionary, brute, walk, frequency, markov),
    )


def attack_vulnerabilities(adversarial: AdversarialAnalysis) -> List[str]:
    vulnerabilities = []
    if adversarial.dictionary_attack.resistance_percentage < 70:
        vulnerabilities.append("Vulnerable to dictionary attacks")
    if adversarial.keyboard_walk_attack.resistance_percentage < 70:
        vulnerabilities.append("Contains keyboard walk patterns")
    if adversarial.frequency_analysis.resistance_percentage < 60:
        vulnerabilities.append("Uneven character frequency")
    if adversarial.markov_chain.resistance_percentage < 70:
        vulnerabilities.append("Predictable character sequences")
    return vulnerabilities or ["No major vulnerabilities detected"]
