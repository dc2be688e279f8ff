"""
intentpass.policy

Password policies as plain configuration records. Two presets ship with
the package: a lenient CONSUMER policy and a strict ENTERPRISE policy.
Callers pick the policy and pass it in; nothing here holds a current mode.

``score`` and ``entropy`` passed to check_password are on 0-100 scales
(see report.intentionality_percent and report.entropy_percent).
"""

import enum
import re
from typing import Dict, List, Union

from pydantic import Field

from .constants import COMPOSITION_SYMBOLS
from .models import FrozenModel
from .predictability import analyze_predictability


class PolicyMode(str, enum.Enum):
    CONSUMER = "CONSUMER"
    ENTERPRISE = "ENTERPRISE"


class Policy(FrozenModel):
    mode: PolicyMode
    min_length: int = Field(ge=0)
    require_uppercase: bool = False
    require_lowercase: bool = False
    require_numbers: bool = False
    require_special_chars: bool = False
    forbid_dictionary: bool = False
    forbid_sequences: bool = False
    forbid_keyboard_walks: bool = False
    forbid_repeating_chars: bool = False
    max_repeat_length: int = Field(default=4, ge=1)
    min_entropy: float = 0
    enforce_intentionality: bool = False
    min_intentionality_score: float = 0


class PolicyCheckResult(FrozenModel):
    passes: bool
    violations: List[str] = Field(default_factory=list)


CONSUMER_POLICY = Policy(
    mode=PolicyMode.CONSUMER,
    min_length=8,
    max_repeat_length=4,
    min_entropy=30,
    enforce_intentionality=False,
    min_intentionality_score=0,
)

ENTERPRISE_POLICY = Policy(
    mode=PolicyMode.ENTERPRISE,
    min_length=14,
    require_uppercase=True,
    require_lowercase=True,
    require_numbers=True,
    require_special_chars=True,
    forbid_dictionary=True,
    forbid_sequences=True,
    forbid_keyboard_walks=True,
    forbid_repeating_chars=True,
    max_repeat_length=2,
    min_entropy=60,
    enforce_intentionality=True,
    min_intentionality_score=50,
)

PRESETS: Dict[PolicyMode, Policy] = {
    PolicyMode.CONSUMER: CONSUMER_POLICY,
    PolicyMode.ENTERPRISE: ENTERPRISE_POLICY,
}

_SYMBOL = re.compile("[" + re.escape(COMPOSITION_SYMBOLS) + "]")


def get_policy(mode: Union[PolicyMode, str]) -> Policy:
    """Look up a preset by ``PolicyMode`` or its (case-insensitive) name."""
    if not isinstance(mode, PolicyMode):
        mode = PolicyMode(str(mode).upper())
    return PRESETS[mode]


def longest_run(password: str) -> int:
    longest = 0
    run = 0
    prev = None
    for c in password:
        run = run + 1 if c == prev else 1
        prev = c
        longest = max(longest, run)
    return longest


def check_password(policy: Policy, password: str, score: float, entropy: float) -> PolicyCheckResult:
    violations: List[str] = []

    if len(password) < policy.min_length:
        violations.append(f"Password must be at least {policy.min_length} characters")
    if policy.require_uppercase and not re.search(r"[A-Z]", password):
        violations.append("Must contain uppercase letter")
    if policy.require_lowercase and not re.search(r"[a-z]", password):
        violations.append("Must contain lowercase letter")
    if policy.require_numbers and not re.search(r"[0-9]", password):
        violations.append("Must contain number")
    if policy.require_special_chars and not _SYMBOL.search(password):
        violations.append("Must contain special character")

    if policy.forbid_dictionary or policy.forbid_sequences or policy.forbid_keyboard_walks:
        pred = analyze_predictability(password)
        if policy.forbid_dictionary and pred.has_weak_substring:
            violations.append(f"Must not contain common words ({', '.join(pred.weak_substrings)})")
        if policy.forbid_sequences and (pred.has_alphabetical_sequence or pred.has_numeric_sequence):
            violations.append("Must not contain sequential characters")
        if policy.forbid_keyboard_walks and pred.has_keyboard_pattern:
            violations.append("Must not contain keyboard walks")

    if policy.forbid_repeating_chars and longest_run(password) > policy.max_repeat_length:
        violations.append(
            f"Must not repeat a character more than {policy.max_repeat_length} times in a row"
        )

    if entropy < policy.min_entropy:
        violations.append(f"Entropy must be at least {policy.min_entropy:g}")
    if policy.enforce_intentionality and score < policy.min_intentionality_score:
        violations.append(f"Intentionality score must be at least {policy.min_intentionality_score:g}")

    return PolicyCheckResult(passes=not violations, violations=violations)
