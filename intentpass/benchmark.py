"""
intentpass.benchmark

Side-by-side comparison of the intentionality score with two reference
strategies: a classic composition-rule validator and a zxcvbn-like
entropy/pattern scorer. All three share the same six-step category scale.
"""

import re
from typing import List, Tuple

from .constants import COMPOSITION_SYMBOLS
from .models import (
    BenchmarkComparison,
    ComparisonSummary,
    PasswordAnalysisResult,
    PasswordCategory,
    SystemResult,
)
from .numeric import round_half_up

# (minimum score, category), checked top-down
CATEGORY_THRESHOLDS: List[Tuple[float, PasswordCategory]] = [
    (90, PasswordCategory.VERY_STRONG),
    (75, PasswordCategory.STRONG),
    (60, PasswordCategory.GOOD),
    (45, PasswordCategory.FAIR),
    (25, PasswordCategory.WEAK),
]

# compared directly against EntropyAnalysis.entropy_value
STRONG_ENTROPY = 50
MODERATE_ENTROPY = 40
HIGH_ENTROPY = 60
HIGH_INTENTIONALITY = 0.6

_SYMBOL = re.compile("[" + re.escape(COMPOSITION_SYMBOLS) + "]")


def get_category(score: float) -> PasswordCategory:
    for minimum, category in CATEGORY_THRESHOLDS:
        if score >= minimum:
            return category
    return PasswordCategory.VERY_WEAK


def evaluate_rule_based(password: str) -> SystemResult:
    """Additive points for length and character variety, the way classic validators do it."""
    passes: List[str] = []
    failures: List[str] = []
    score = 0
    length = len(password)

    # --- Basic rules ---
    if length >= 8:
        passes.append("At least 8 characters")
        score += 20
    else:
        failures.append("Less than 8 characters")
    if length >= 12:
        passes.append("At least 12 characters")
        score += 10

    # --- Character variety ---
    if re.search(r"[A-Z]", password):
        passes.append("Contains uppercase letter")
        score += 15
    else:
        failures.append("No uppercase letters")
    if re.search(r"[a-z]", password):
        passes.append("Contains lowercase letter")
        score += 15
    else:
        failures.append("No lowercase letters")
    if re.search(r"[0-9]", password):
        passes.append("Contains number")
        score += 15
    else:
        failures.append("No numbers")
    if _SYMBOL.search(password):
        passes.append("Contains special character")
        score += 15
    else:
        failures.append("No special characters")

    if length >= 16:
        passes.append("Exceeds minimum length")
        score += 10

    if failures:
        summary = f"Failures: {', '.join(failures)}"
    else:
        summary = "Passes all basic requirements."

    return SystemResult(
        system="Rule-Based Validator",
        score=score,
        category=get_category(score),
        passes=passes,
        failures=failures,
        explanation=(
            "Traditional validator checks compliance with password composition rules. "
            f"Score: {score}/100. {summary}"
        ),
    )


def evaluate_zxcvbn(password: str, analysis: PasswordAnalysisResult) -> SystemResult:
    """Simplified zxcvbn-style scoring: entropy plus pattern penalties, lenient on length."""
    passes: List[str] = []
    failures: List[str] = []
    score = 0
    entropy = analysis.entropy.entropy_value
    pred = analysis.predictability

    if entropy >= STRONG_ENTROPY:
        passes.append("Strong entropy")
        score += 30
    elif entropy >= MODERATE_ENTROPY:
        passes.append("Moderate entropy")
        score += 20
    else:
        failures.append("Low entropy")

    if not pred.has_alphabetical_sequence and not pred.has_numeric_sequence:
        passes.append("No sequential patterns")
        score += 15
    else:
        failures.append("Contains sequences")

    if not pred.has_keyboard_pattern:
        passes.append("No keyboard walks")
        score += 15
    else:
        failures.append("Contains keyboard walks")

    if len(password) >= 8:
        passes.append("Sufficient length")
        score += 20
    if len(password) >= 20:
        passes.append("Very long password")
        score += 10

    types = sum(
        1
        for found in (
            re.search(r"[a-z]", password),
            re.search(r"[A-Z]", password),
            re.search(r"[0-9]", password),
            _SYMBOL.search(password),
        )
        if found
    )
    if types >= 3:
        passes.append("Good character variety")
        score += 10
    else:
        failures.append("Limited character types")

    return SystemResult(
        system="zxcvbn-like",
        score=score,
        category=get_category(score),
        passes=passes,
        failures=failures,
        explanation=(
            f"Entropy and pattern-based analysis similar to zxcvbn. Score: {score}/100. "
            "Focuses on entropy and common patterns rather than composition rules."
        ),
    )


def evaluate_intentpass(analysis: PasswordAnalysisResult, overall_score: float) -> SystemResult:
    pred = analysis.predictability
    score = round_half_up(overall_score)
    passes: List[str] = []
    failures: List[str] = []

    if not pred.has_alphabetical_sequence and not pred.has_numeric_sequence:
        passes.append("No sequences")
    if analysis.entropy.entropy_value >= HIGH_ENTROPY:
        passes.append("High entropy")
    else:
        failures.append("Moderate entropy")
    if analysis.intentionality_index >= HIGH_INTENTIONALITY:
        passes.append("High intentionality")
    else:
        failures.append("Low intentionality")

    return SystemResult(
        system="IntentPass",
        score=score,
        category=get_category(overall_score),
        passes=passes,
        failures=failures,
        explanation=(
            "IntentPass analyzes structural coherence and intentionality beyond traditional metrics. "
            f"Score: {score}/100."
        ),
    )


def compare(
    analysis: PasswordAnalysisResult,
    intentpass: SystemResult,
    rule_based: SystemResult,
    zxcvbn: SystemResult,
) -> ComparisonSummary:
    differences: List[str] = []

    gap = intentpass.score - rule_based.score
    if gap > 10:
        differences.append("IntentPass rates structural coherence higher than rule compliance")
    elif gap < -10:
        differences.append("Rule-based validator more lenient on password composition")

    if rule_based.category == PasswordCategory.STRONG and intentpass.category == PasswordCategory.FAIR:
        differences.append("Password meets compliance rules but lacks true intentionality")

    if analysis.predictability.has_alphabetical_sequence or analysis.predictability.has_numeric_sequence:
        differences.append("IntentPass penalizes predictable patterns; others focus on composition")

    if intentpass.score > rule_based.score and intentpass.score > zxcvbn.score:
        advantage = "IntentPass identifies intentionality and structure that other systems miss"
    else:
        advantage = "Different systems emphasize different security aspects"

    return ComparisonSummary(intentpass_advantage=advantage, key_differences=differences)


def create_benchmark(
    password: str, analysis: PasswordAnalysisResult, overall_score: float
) -> BenchmarkComparison:
    rule_based = evaluate_rule_based(password)
    zxcvbn = evaluate_zxcvbn(password, analysis)
    intentpass = evaluate_intentpass(analysis, overall_score)
    return BenchmarkComparison(
        password=password,
        intentpass=intentpass,
        rule_based=rule_based,
        zxcvbn=zxcvbn,
        comparison=compare(analysis, intentpass, rule_based, zxcvbn),
    )
