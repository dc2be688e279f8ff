"""
intentpass.scorer

Password intentionality scorer:
- runs the segmenter and the entropy / predictability / random-smash /
  ambiguity analyzers
- derives component scores, an overall 0-100 score and an intentionality
  index in [-1, 1]
- builds the ordered list of diagnostics (strengths first, then warnings)

analyze_password(password) is the single entry point the downstream
consumers (classifier, suggestions, adversarial, benchmark) build on.
"""

import logging
from typing import List, Optional

from .ambiguity import analyze_ambiguity
from .constants import INTENTIONALITY_RANGES, SCORE_WEIGHTS, THRESHOLDS
from .entropy import analyze_entropy
from .models import (
    AmbiguityAnalysis,
    ComponentScores,
    Diagnostic,
    DiagnosticType,
    EntropyAnalysis,
    IntentionalityCategory,
    PasswordAnalysisResult,
    PredictabilityAnalysis,
    RandomSmashAnalysis,
    SegmentationResult,
)
from .numeric import clamp, round_half_up
from .predictability import analyze_predictability
from .random_smash import analyze_random_smash
from .segmenter import segment_password

logger = logging.getLogger(__name__)


def _strength(message: str) -> Diagnostic:
    return Diagnostic(type=DiagnosticType.STRENGTH, message=message)


def _warning(message: str, pattern: Optional[str] = None) -> Diagnostic:
    return Diagnostic(type=DiagnosticType.WARNING, message=message, pattern=pattern)


def generate_diagnostics(
    password: str,
    predictability: PredictabilityAnalysis,
    random_smash: RandomSmashAnalysis,
    ambiguity: AmbiguityAnalysis,
    entropy: EntropyAnalysis,
) -> List[Diagnostic]:
    diagnostics: List[Diagnostic] = []
    dist = entropy.character_class_distribution

    # Positive signals
    if dist.uppercase > 0:
        diagnostics.append(_strength("Contains uppercase letters for better variety"))
    if dist.symbols > 0:
        diagnostics.append(_strength("Includes special characters for increased complexity"))
    if entropy.balance_score > THRESHOLDS["balance_strength"]:
        diagnostics.append(_strength("Well-balanced character class distribution"))
    if not entropy.has_consecutive_repetition:
        diagnostics.append(_strength("No problematic character repetition"))

    # Warnings
    if predictability.has_alphabetical_sequence:
        seqs = predictability.alphabetical_sequences
        diagnostics.append(_warning(f"Contains alphabetical sequence: {', '.join(seqs)}", seqs[0]))
    if predictability.has_numeric_sequence:
        seqs = predictability.numeric_sequences
        diagnostics.append(_warning(f"Contains numeric sequence: {', '.join(seqs)}", seqs[0]))
    if predictability.has_keyboard_pattern:
        kb = predictability.keyboard_patterns
        diagnostics.append(_warning(f"Contains keyboard pattern: {', '.join(kb)}", kb[0]))
    if predictability.has_weak_substring:
        weak = predictability.weak_substrings
        diagnostics.append(_warning(f"Contains common word: {', '.join(weak)}", weak[0]))
    if entropy.has_consecutive_repetition:
        diagnostics.append(
            _warning(f"Excessive character repetition: {', '.join(entropy.repetition_patterns)}")
        )
    if random_smash.is_random_smash:
        diagnostics.append(
            _warning("Pattern suggests random keyboard smashing rather than intentional design")
        )
    if ambiguity.ambiguity_ratio > THRESHOLDS["ambiguity_warning_ratio"]:
        diagnostics.append(
            _warning("Contains easily confused characters (like 0/O, 1/l) - may cause entry errors")
        )
    if len(password) < THRESHOLDS["short_length"]:
        diagnostics.append(
            _warning(f"Length of {len(password)} characters is relatively short - consider extending")
        )
    if dist.digits == 0 and dist.symbols == 0:
        diagnostics.append(_warning("Only uses letters - add numbers or symbols for better security"))

    return diagnostics


def calculate_component_scores(
    segmentation: SegmentationResult,
    predictability: PredictabilityAnalysis,
    random_smash: RandomSmashAnalysis,
    entropy: EntropyAnalysis,
) -> ComponentScores:
    structural = entropy.balance_score * 0.6 + (0.4 if segmentation.total_segments > 1 else 0.0)

    # entropy/balance blend; AmbiguityAnalysis does not feed this component
    if entropy.entropy_value == 0:
        visual = 0.0
    else:
        visual = entropy.entropy_value * 0.3 + entropy.balance_score * 0.7

    return ComponentScores(
        structural_coherence=min(structural, 1.0),
        predictability_penalty=predictability.predictability_score,
        random_smash_penalty=random_smash.random_smash_score,
        entropy_balance=entropy.balance_score,
        visual_ambiguity=visual,
    )


def overall_score(scores: ComponentScores) -> int:
    """Start from 100, subtract the weighted penalties and add structural coherence."""
    score = 100.0
    score -= scores.predictability_penalty * SCORE_WEIGHTS["predictability_penalty"]
    score -= scores.random_smash_penalty * SCORE_WEIGHTS["random_smash_penalty"]
    score -= (1 - scores.entropy_balance) * SCORE_WEIGHTS["entropy_balance"]
    score -= scores.visual_ambiguity * SCORE_WEIGHTS["visual_ambiguity"]
    score += scores.structural_coherence * SCORE_WEIGHTS["structural_coherence"]
    return int(clamp(round_half_up(score), 0, 100))


def categorize(index: float) -> IntentionalityCategory:
    if index >= INTENTIONALITY_RANGES["structured"][0]:
        return IntentionalityCategory.STRUCTURED
    if index >= INTENTIONALITY_RANGES["hack"][0]:
        return IntentionalityCategory.HACK
    return IntentionalityCategory.CHAOTIC


def _empty_result(password: str) -> PasswordAnalysisResult:
    return PasswordAnalysisResult(
        password=password,
        length=0,
        overall_score=0,
        component_scores=ComponentScores(),
        intentionality_index=0.0,
        intentionality_category=IntentionalityCategory.CHAOTIC,
        segmentation=SegmentationResult(),
        predictability=PredictabilityAnalysis(),
        random_smash=RandomSmashAnalysis(
            vowel_to_consonant_ratio=0.5,
            pronounceability=0.0,
            adjacency_randomness=0.5,
            is_random_smash=False,
            random_smash_score=0.0,
        ),
        ambiguity=AmbiguityAnalysis(),
        entropy=EntropyAnalysis(),
        diagnostics=[],
    )


def analyze_password(password: str) -> PasswordAnalysisResult:
    """
    Analyze ``password`` and return the aggregated, immutable result.

    The empty string short-circuits to an all-zero ``chaotic`` result with
    no diagnostics.
    """
    if not password:
        return _empty_result(password)

    segmentation = segment_password(password)
    predictability = analyze_predictability(password)
    random_smash = analyze_random_smash(password)
    ambiguity = analyze_ambiguity(password)
    entropy = analyze_entropy(password)
    scores = calculate_component_scores(segmentation, predictability, random_smash, entropy)

    index = scores.structural_coherence - (
        predictability.predictability_score + random_smash.random_smash_score
    ) / 2

    result = PasswordAnalysisResult(
        password=password,
        length=len(password),
        overall_score=overall_score(scores),
        component_scores=scores,
        intentionality_index=clamp(index, -1.0, 1.0),
        intentionality_category=categorize(index),
        segmentation=segmentation,
        predictability=predictability,
        random_smash=random_smash,
        ambiguity=ambiguity,
        entropy=entropy,
        diagnostics=generate_diagnostics(password, predictability, random_smash, ambiguity, entropy),
    )
    logger.debug(
        "analysis complete: length=%d score=%d category=%s",
        result.length,
        result.overall_score,
        result.intentionality_category.value,
    )
    return result
