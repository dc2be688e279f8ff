"""
intentpass.models

Immutable result records produced by the analyzers. Attributes are
snake_case in Python and serialise to camelCase (``model_dump(by_alias=True)``)
for the HTTP surface.
"""

import enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# --------------------------------------------------------------------------
# Enumerations
# --------------------------------------------------------------------------


class SegmentType(str, enum.Enum):
    ALPHA = "alpha"
    DIGIT = "digit"
    SYMBOL = "symbol"
    # declared for completeness; the run-based segmenter never emits it
    MIXED = "mixed"


class IntentionalityCategory(str, enum.Enum):
    STRUCTURED = "structured"
    HACK = "hack"
    CHAOTIC = "chaotic"


class DiagnosticType(str, enum.Enum):
    WARNING = "warning"
    STRENGTH = "strength"
    NEUTRAL = "neutral"


class BehavioralClass(str, enum.Enum):
    PREDICTABLE = "PREDICTABLE"
    RANDOM = "RANDOM"
    PASSPHRASE = "PASSPHRASE"
    COMPLIANCE_HACK = "COMPLIANCE_HACK"
    BALANCED = "BALANCED"


class SuggestionImpact(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SuggestionCategory(str, enum.Enum):
    STRUCTURE = "structure"
    ENTROPY = "entropy"
    PATTERN = "pattern"
    MEMORABILITY = "memorability"


class PasswordCategory(str, enum.Enum):
    VERY_WEAK = "VERY_WEAK"
    WEAK = "WEAK"
    FAIR = "FAIR"
    GOOD = "GOOD"
    STRONG = "STRONG"
    VERY_STRONG = "VERY_STRONG"


# --------------------------------------------------------------------------
# Analyzer records
# --------------------------------------------------------------------------


class Segment(FrozenModel):
    text: str
    type: SegmentType
    length: int = Field(ge=0)
    entropy: float = Field(ge=0.0)
    is_weak_word: bool


class SegmentationResult(FrozenModel):
    segments: List[Segment] = Field(default_factory=list)
    total_segments: int = 0


class CharacterClassDistribution(FrozenModel):
    uppercase: int = Field(default=0, ge=0)
    lowercase: int = Field(default=0, ge=0)
    digits: int = Field(default=0, ge=0)
    symbols: int = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.uppercase + self.lowercase + self.digits + self.symbols


class EntropyAnalysis(FrozenModel):
    has_consecutive_repetition: bool = False
    repetition_patterns: List[str] = Field(default_factory=list)
    character_class_distribution: CharacterClassDistribution = Field(
        default_factory=CharacterClassDistribution
    )
    balance_score: float = Field(default=0.0, ge=0.0, le=1.0)
    entropy_value: float = Field(default=0.0, ge=0.0, le=1.0)


class PredictabilityAnalysis(FrozenModel):
    has_alphabetical_sequence: bool = False
    alphabetical_sequences: List[str] = Field(default_factory=list)
    has_numeric_sequence: bool = False
    numeric_sequences: List[str] = Field(default_factory=list)
    has_keyboard_pattern: bool = False
    keyboard_patterns: List[str] = Field(default_factory=list)
    has_weak_substring: bool = False
    weak_substrings: List[str] = Field(default_factory=list)
    predictability_score: float = Field(default=0.0, ge=0.0, le=1.0)


class RandomSmashAnalysis(FrozenModel):
    vowel_to_consonant_ratio: float = Field(ge=0.0, le=1.0)
    pronounceability: float = Field(ge=0.0, le=1.0)
    adjacency_randomness: float = Field(ge=0.0, le=1.0)
    is_random_smash: bool
    random_smash_score: float = Field(ge=0.0, le=1.0)


class AmbiguityAnalysis(FrozenModel):
    confusable_count: int = Field(default=0, ge=0)
    total_ambiguous_chars: int = Field(default=0, ge=0)
    ambiguity_ratio: float = Field(default=0.0, ge=0.0, le=1.0)
    ambiguity_score: float = Field(default=0.0, ge=0.0, le=1.0)


class ComponentScores(FrozenModel):
    structural_coherence: float = 0.0
    predictability_penalty: float = 0.0
    random_smash_penalty: float = 0.0
    entropy_balance: float = 0.0
    # entropy/balance blend, not the ambiguity analyzer output
    visual_ambiguity: float = 0.0


class Diagnostic(FrozenModel):
    type: DiagnosticType
    message: str
    pattern: Optional[str] = None


class PasswordAnalysisResult(FrozenModel):
    password: str
    length: int = Field(ge=0)
    overall_score: int = Field(ge=0, le=100)
    component_scores: ComponentScores
    intentionality_index: float = Field(ge=-1.0, le=1.0)
    intentionality_category: IntentionalityCategory
    segmentation: SegmentationResult
    predictability: PredictabilityAnalysis
    random_smash: RandomSmashAnalysis
    ambiguity: AmbiguityAnalysis
    entropy: EntropyAnalysis
    diagnostics: List[Diagnostic] = Field(default_factory=list)


# --------------------------------------------------------------------------
# Downstream consumers
# --------------------------------------------------------------------------


class Likelihood(FrozenModel):
    predictable: int = 0
    random: int = 0
    passphrase: int = 0
    compliance_hack: int = 0
    balanced: int = 0

    @property
    def total(self) -> int:
        return self.predictable + self.random + self.passphrase + self.compliance_hack + self.balanced


class ClassificationResult(FrozenModel):
    classification: BehavioralClass
    confidence: int = Field(ge=0, le=100)
    explanation: str
    likelihood: Likelihood


class Suggestion(FrozenModel):
    id: str
    title: str
    description: str
    example: str
    impact: SuggestionImpact
    category: SuggestionCategory


class AttackScenario(FrozenModel):
    name: str
    description: str
    resistance_percentage: int = Field(ge=0, le=100)
    estimated_time: str
    time_in_seconds: float = Field(ge=0.0)
    explanation: str


class AdversarialAnalysis(FrozenModel):
    dictionary_attack: AttackScenario
    brute_force: AttackScenario
    keyboard_walk_attack: AttackScenario
    frequency_analysis: AttackScenario
    markov_chain: AttackScenario
    overall_resistance: int = Field(ge=0, le=100)

    def scenarios(self) -> List[AttackScenario]:
        return [
            self.dictionary_attack,
            self.brute_force,
            self.keyboard_walk_attack,
            self.frequency_analysis,
            self.markov_chain,
        ]


class SystemResult(FrozenModel):
    system: str
    score: int
    category: PasswordCategory
    passes: List[str] = Field(default_factory=list)
    failures: List[str] = Field(default_factory=list)
    explanation: str


class ComparisonSummary(FrozenModel):
    intentpass_advantage: str
    key_differences: List[str] = Field(default_factory=list)


class BenchmarkComparison(FrozenModel):
    password: str
    intentpass: SystemResult
    rule_based: SystemResult
    zxcvbn: SystemResult
    comparison: ComparisonSummary


class RadarMetrics(FrozenModel):
    structural_integrity: float = 0.0
    entropy_quality: float = 0.0
    pattern_avoidance: float = 0.0
    intentionality_index: float = 0.0
    resilience_score: float = 0.0
    behavioral_balance: float = 0.0
