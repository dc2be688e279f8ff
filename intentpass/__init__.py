"""
intentpass

Password intentionality analysis: explainable scoring of whether a password
reflects deliberate structure rather than random smashing or rule gaming.
"""

from .adversarial import analyze_adversarial, attack_vulnerabilities
from .ambiguity import analyze_ambiguity
from .benchmark import create_benchmark
from .classifier import classify_password
from .entropy import analyze_entropy
from .models import (
    BehavioralClass,
    IntentionalityCategory,
    PasswordAnalysisResult,
    PasswordCategory,
)
from .predictability import analyze_predictability
from .random_smash import analyze_random_smash
from .report import build_report, radar_metrics
from .scorer import analyze_password
from .segmenter import segment_password
from .suggestions import generate_suggestions, rewrite_example

__version__ = "0.1.0"

__all__ = [
    "analyze_adversarial",
    "analyze_ambiguity",
    "analyze_entropy",
    "analyze_password",
    "analyze_predictability",
    "analyze_random_smash",
    "attack_vulnerabilities",
    "build_report",
    "classify_password",
    "create_benchmark",
    "generate_suggestions",
    "radar_metrics",
    "rewrite_example",
    "segment_password",
    "BehavioralClass",
    "IntentionalityCategory",
    "PasswordAnalysisResult",
    "PasswordCategory",
]
