"""
intentpass.classifier

Map an analysis result onto one of five behavioral classes:
PREDICTABLE, RANDOM, PASSPHRASE, COMPLIANCE_HACK, BALANCED.

Each class collects points from independent heuristics; points are
normalised into a likelihood distribution (percent) and the top class wins.
"""

import re
from typing import Dict

from .constants import SPECIAL_CHARACTERS
from .models import BehavioralClass, ClassificationResult, Likelihood, PasswordAnalysisResult
from .numeric import round_half_up

# compared directly against EntropyAnalysis.entropy_value
HIGH_ENTROPY = 60
LOW_ENTROPY = 40
BALANCED_ENTROPY_RANGE = (40, 70)

_WHITESPACE = re.compile(r"\s")
_SEPARATOR = re.compile(r"[\s\-_]")
_SEPARATORS = re.compile(r"[\s\-_]+")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

EXPLANATIONS: Dict[BehavioralClass, str] = {
    BehavioralClass.PREDICTABLE: (
        "Contains predictable patterns like sequences or keyboard walks that attackers commonly target."
    ),
    BehavioralClass.RANDOM: (
        "Appears to be randomly generated characters with high entropy but lacks structural intentionality."
    ),
    BehavioralClass.PASSPHRASE: (
        "Uses multiple words separated by spaces or hyphens, creating memorable yet secure passwords."
    ),
    BehavioralClass.COMPLIANCE_HACK: (
        "Meets basic security rules but lacks true intentionality - likely created to satisfy requirements."
    ),
    BehavioralClass.BALANCED: (
        "Well-designed password with intentional structure, good entropy, and resistance to common attacks."
    ),
}

# evaluation order; ties keep the earlier winner, BALANCED is the baseline
_ORDER = (
    BehavioralClass.PREDICTABLE,
    BehavioralClass.RANDOM,
    BehavioralClass.PASSPHRASE,
    BehavioralClass.COMPLIANCE_HACK,
    BehavioralClass.BALANCED,
)


def class_scores(password: str, analysis: PasswordAnalysisResult) -> Dict[BehavioralClass, float]:
    """Raw, unnormalised points per class."""
    scores = {cls: 0.0 for cls in _ORDER}
    pred = analysis.predictability
    entropy = analysis.entropy.entropy_value

    has_spaces = bool(_WHITESPACE.search(password))
    has_sequences = pred.has_alphabetical_sequence or pred.has_numeric_sequence
    has_walks = pred.has_keyboard_pattern
    has_upper_and_lower = bool(re.search(r"[A-Z]", password)) and bool(re.search(r"[a-z]", password))
    has_numbers = bool(re.search(r"[0-9]", password))
    has_special = bool(_SPECIAL.search(password))

    # Passphrase: words separated by whitespace, hyphens or underscores
    if _SEPARATOR.search(password):
        words = [w for w in _SEPARATORS.split(password) if len(w) > 2]
        if len(words) >= 3:
            scores[BehavioralClass.PASSPHRASE] += 40
            if entropy > HIGH_ENTROPY:
                scores[BehavioralClass.PASSPHRASE] += 20

    # Predictable: sequences and keyboard walks
    if has_sequences or has_walks:
        scores[BehavioralClass.PREDICTABLE] += 30
        if entropy < LOW_ENTROPY:
            scores[BehavioralClass.PREDICTABLE] += 20

    # Random: high entropy, no visible structure
    if entropy > HIGH_ENTROPY and not (has_spaces or has_sequences or has_walks):
        scores[BehavioralClass.RANDOM] += 35
        if not has_upper_and_lower and not has_numbers:
            scores[BehavioralClass.RANDOM] += 15

    # Compliance hack: satisfies composition rules without intentionality
    if has_upper_and_lower and has_numbers and (has_special or len(password) >= 12):
        if analysis.intentionality_index < 0.3:
            scores[BehavioralClass.COMPLIANCE_HACK] += 30

    # Balanced: good mix without extremes
    if not (has_sequences or has_walks or has_spaces):
        if has_upper_and_lower and (has_numbers or has_special):
            low, high = BALANCED_ENTROPY_RANGE
            if low <= entropy <= high:
                scores[BehavioralClass.BALANCED] += 35

    return scores


def normalize(scores: Dict[BehavioralClass, float]) -> Dict[BehavioralClass, float]:
    total = sum(scores.values())
    if total <= 0:
        return {cls: 100.0 / len(_ORDER) for cls in _ORDER}
    return {cls: scores[cls] / total * 100 for cls in _ORDER}


def classify_password(password: str, analysis: PasswordAnalysisResult) -> ClassificationResult:
    normalized = normalize(class_scores(password, analysis))

    winner = BehavioralClass.BALANCED
    best = normalized[BehavioralClass.BALANCED]
    for cls in _ORDER:
        if normalized[cls] > best:
            winner, best = cls, normalized[cls]

    return ClassificationResult(
        classification=winner,
        confidence=round_half_up(best),
        explanation=EXPLANATIONS[winner],
        likelihood=Likelihood(
            predictable=round_half_up(normalized[BehavioralClass.PREDICTABLE]),
            random=round_half_up(normalized[BehavioralClass.RANDOM]),
            passphrase=round_half_up(normalized[BehavioralClass.PASSPHRASE]),
            compliance_hack=round_half_up(normalized[BehavioralClass.COMPLIANCE_HACK]),
            balanced=round_half_up(normalized[BehavioralClass.BALANCED]),
        ),
    )
