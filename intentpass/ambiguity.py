"""Count visually confusable characters (1/l/I, 0/O ...)."""

from .constants import CONFUSABLE_CHARS
from .models import AmbiguityAnalysis


def analyze_ambiguity(password: str) -> AmbiguityAnalysis:
    confusable = [c for c in password if c in CONFUSABLE_CHARS]
    ratio = len(confusable) / len(password) if password else 0.0
    return AmbiguityAnalysis(
        confusable_count=len(confusable),
        total_ambiguous_chars=len(set(confusable)),
        ambiguity_ratio=ratio,
        ambiguity_score=min(ratio, 1.0),
    )
