"""
intentpass.report

Derived views built from one analysis: radar metrics, the intentionality
tier, and a full report that runs every downstream consumer once.
Each view is a plain function of its inputs.
"""

import enum
from typing import List, Optional

from pydantic import Field

from .adversarial import analyze_adversarial, attack_vulnerabilities
from .benchmark import create_benchmark
from .breach import BreachCheckResult, breach_penalty
from .classifier import classify_password
from .models import (
    AdversarialAnalysis,
    BenchmarkComparison,
    ClassificationResult,
    FrozenModel,
    PasswordAnalysisResult,
    RadarMetrics,
    Suggestion,
)
from .policy import Policy, PolicyCheckResult, check_password
from .scorer import analyze_password
from .suggestions import generate_suggestions


class IntentionalityTier(str, enum.Enum):
    PLATINUM = "PLATINUM"
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"


TIER_DESCRIPTIONS = {
    IntentionalityTier.PLATINUM: "Exceptional intentionality - expertly designed",
    IntentionalityTier.GOLD: "High intentionality - well-designed password",
    IntentionalityTier.SILVER: "Moderate intentionality - adequate design",
    IntentionalityTier.BRONZE: "Low intentionality - weak design",
}


class PasswordReport(FrozenModel):
    analysis: PasswordAnalysisResult
    classification: Optional[ClassificationResult] = None
    suggestions: List[Suggestion] = Field(default_factory=list)
    adversarial: Optional[AdversarialAnalysis] = None
    vulnerabilities: List[str] = Field(default_factory=list)
    benchmark: Optional[BenchmarkComparison] = None
    radar: RadarMetrics
    tier: IntentionalityTier
    breach: Optional[BreachCheckResult] = None
    breach_penalty: float = 0.0
    policy: Optional[PolicyCheckResult] = None


def intentionality_percent(analysis: PasswordAnalysisResult) -> float:
    """The [-1, 1] index rescaled onto 0-100."""
    return max(0.0, (analysis.intentionality_index + 1) * 50)


def entropy_percent(analysis: PasswordAnalysisResult) -> float:
    return analysis.entropy.entropy_value * 100


def intentionality_tier(percent: float) -> IntentionalityTier:
    if percent >= 76:
        return IntentionalityTier.PLATINUM
    if percent >= 51:
        return IntentionalityTier.GOLD
    if percent >= 26:
        return IntentionalityTier.SILVER
    return IntentionalityTier.BRONZE


def radar_metrics(
    analysis: PasswordAnalysisResult,
    adversarial: Optional[AdversarialAnalysis] = None,
    classification: Optional[ClassificationResult] = None,
) -> RadarMetrics:
    if analysis.length == 0:
        return RadarMetrics()
    scores = analysis.component_scores
    return RadarMetrics(
        structural_integrity=scores.structural_coherence * 100,
        entropy_quality=analysis.entropy.balance_score * 100,
        pattern_avoidance=max(0.0, 100 - scores.predictability_penalty * 100),
        intentionality_index=intentionality_percent(analysis),
        resilience_score=adversarial.overall_resistance if adversarial else 50,
        behavioral_balance=classification.confidence if classification else 50,
    )


def build_report(
    password: str,
    policy: Optional[Policy] = None,
    breach: Optional[BreachCheckResult] = None,
) -> PasswordReport:
    """
    Analyze once and fan out to classifier, suggestions, adversarial and
    benchmark. The empty password only gets the bare analysis.
    ``breach`` is an optional, already-fetched breach result.
    """
    analysis = analyze_password(password)

    classification = None
    suggestions: List[Suggestion] = []
    adversarial = None
    vulnerabilities: List[str] = []
    benchmark = None
    if password:
        classification = classify_password(password, analysis)
        suggestions = generate_suggestions(password, analysis, classification.classification)
        adversarial = analyze_adversarial(password, analysis)
        vulnerabilities = attack_vulnerabilities(adversarial)
        benchmark = create_benchmark(password, analysis, analysis.overall_score)

    policy_result = None
    if policy is not None:
        policy_result = check_password(
            policy, password, intentionality_percent(analysis), entropy_percent(analysis)
        )

    return PasswordReport(
        analysis=analysis,
        classification=classification,
        suggestions=suggestions,
        adversarial=adversarial,
        vulnerabilities=vulnerabilities,
        benchmark=benchmark,
        radar=radar_metrics(analysis, adversarial, classification),
        tier=intentionality_tier(intentionality_percent(analysis)),
        breach=breach,
        breach_penalty=breach_penalty(breach),
        policy=policy_result,
    )
