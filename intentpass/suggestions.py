"""
intentpass.suggestions

Turn an analysis result and its behavioral class into concrete, prioritized
suggestions, and optionally rewrite the user's own password to show what a
suggestion means in practice.
"""

import re
from datetime import date
from secrets import choice
from typing import Callable, Dict, List, Optional

from .classifier import LOW_ENTROPY
from .constants import SPECIAL_CHARACTERS
from .models import (
    BehavioralClass,
    PasswordAnalysisResult,
    Suggestion,
    SuggestionCategory,
    SuggestionImpact,
)

IMPACT_ORDER: Dict[SuggestionImpact, int] = {
    SuggestionImpact.HIGH: 0,
    SuggestionImpact.MEDIUM: 1,
    SuggestionImpact.LOW: 2,
}

_REPEAT = re.compile(r"(.)\1{2,}")
_COMMON_SUBS = re.compile(r"[!@#$%]|[0o]", re.IGNORECASE)
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")

BOOST_SYMBOLS = "!@#$%^&*"


def _suggestion(
    id: str,
    title: str,
    description: str,
    example: str,
    impact: SuggestionImpact,
    category: SuggestionCategory,
) -> Suggestion:
    return Suggestion(
        id=id, title=title, description=description, example=example, impact=impact, category=category
    )


def character_types(password: str) -> int:
    """How many of lower / upper / digit / symbol appear."""
    checks = [
        re.search(r"[a-z]", password),
        re.search(r"[A-Z]", password),
        re.search(r"[0-9]", password),
        _SPECIAL.search(password),
    ]
    return sum(1 for c in checks if c)


def generate_suggestions(
    password: str,
    analysis: PasswordAnalysisResult,
    classification: BehavioralClass,
) -> List[Suggestion]:
    """
    Independent checks, each adding at most one suggestion. The list comes
    back ordered high -> medium -> low impact; ties keep the check order.
    """
    suggestions: List[Suggestion] = []
    pred = analysis.predictability

    if pred.has_alphabetical_sequence:
        suggestions.append(_suggestion(
            "sequence-replace",
            "Replace Alphabetical Sequences",
            'Your password contains sequential letters (like "abc" or "xyz") that are easily guessable.',
            'Replace "abc" with "a8c" or "a@c" using substitutions',
            SuggestionImpact.HIGH,
            SuggestionCategory.PATTERN,
        ))

    if pred.has_keyboard_pattern:
        suggestions.append(_suggestion(
            "keyboard-walks",
            "Avoid Keyboard Walks",
            'Adjacent keys on your keyboard (like "qwerty" or "asdf") are common attack patterns.',
            'Replace "qwerty" with "qx#werty" to break the pattern',
            SuggestionImpact.HIGH,
            SuggestionCategory.PATTERN,
        ))

    if analysis.entropy.entropy_value < LOW_ENTROPY:
        suggestions.append(_suggestion(
            "add-entropy",
            "Increase Entropy & Randomness",
            "Your password lacks sufficient randomness. Mix character types to increase entropy.",
            'Add numbers, symbols, or mix case: "Pass123!" instead of "Password"',
            SuggestionImpact.HIGH,
            SuggestionCategory.ENTROPY,
        ))

    if _REPEAT.search(password):
        suggestions.append(_suggestion(
            "reduce-repetition",
            "Reduce Repeating Characters",
            'Repeated characters (like "aaa" or "111") reduce entropy and intentionality.',
            'Replace "aaa" with "a9a" or use variation instead',
            SuggestionImpact.MEDIUM,
            SuggestionCategory.ENTROPY,
        ))

    if _COMMON_SUBS.search(password):
        suggestions.append(_suggestion(
            "strong-substitution",
            "Use Stronger Character Substitutions",
            'Common replacements like "0" for "O" or "!" for "I" are well-known to attackers.',
            'Use less obvious substitutions: "P@ssw0rd" -> "Pλ55w□rd"',
            SuggestionImpact.LOW,
            SuggestionCategory.ENTROPY,
        ))

    types = character_types(password)
    if types < 3:
        suggestions.append(_suggestion(
            "char-variety",
            "Use More Character Types",
            f"You're using only {types} character type(s). Mix uppercase, lowercase, numbers, and symbols.",
            'Combine types: "password123!@#" includes all four character classes',
            SuggestionImpact.HIGH,
            SuggestionCategory.ENTROPY,
        ))

    if classification == BehavioralClass.RANDOM:
        suggestions.append(_suggestion(
            "add-structure",
            "Add Intentional Structure",
            "While random, your password lacks memorable structure. Consider mixing in words.",
            '"aB7$mK9#" -> "aB7$-mKey-9#" (adds pattern for memory)',
            SuggestionImpact.MEDIUM,
            SuggestionCategory.MEMORABILITY,
        ))

    if classification == BehavioralClass.PASSPHRASE and len(password) > 30:
        suggestions.append(_suggestion(
            "shorten-passphrase",
            "Consider Shortening Your Passphrase",
            "Your passphrase is quite long. Shorter versions can maintain security.",
            '"correct-horse-battery-staple" -> "Correct-Horse-2@2024"',
            SuggestionImpact.LOW,
            SuggestionCategory.MEMORABILITY,
        ))

    if classification == BehavioralClass.COMPLIANCE_HACK:
        suggestions.append(_suggestion(
            "intentional-redesign",
            "Redesign for Intentionality",
            "Your password appears designed just for compliance. Make it intentionally strong.",
            'Instead of "Pass123!", try something with personal meaning: "JavaCat#2024"',
            SuggestionImpact.HIGH,
            SuggestionCategory.STRUCTURE,
        ))

    if len(password) < 12:
        suggestions.append(_suggestion(
            "increase-length",
            "Increase Password Length",
            "Longer passwords are exponentially harder to crack.",
            'Aim for 14+ characters: "My@Secure#Pass2024"',
            SuggestionImpact.HIGH,
            SuggestionCategory.STRUCTURE,
        ))

    return sorted(suggestions, key=lambda s: IMPACT_ORDER[s.impact])


# ---------------------------------------------------------------------------
# Rewrite examples built from the user's own password
# ---------------------------------------------------------------------------


def _sub_ci(pattern: str, repl: str, text: str) -> str:
    return re.sub(pattern, repl, text, flags=re.IGNORECASE)


def sequence_replacement(password: str) -> str:
    out = _sub_ci("abc", "a8c", password)
    out = _sub_ci("def", "d3f", out)
    out = _sub_ci("xyz", "x9z", out)
    out = out.replace("123", "1!3")
    return out[:len(password) + 2]


def keyboard_walk_fix(password: str) -> str:
    out = _sub_ci("qwerty", "qx#werty", password)
    out = _sub_ci("asdf", "a$df", out)
    out = _sub_ci("zxcv", "z&cv", out)
    return out[:len(password) + 2]


def entropy_boost(password: str) -> str:
    """Append a random symbol and digit. Not deterministic."""
    return password + choice(BOOST_SYMBOLS) + choice("0123456789")


def repetition_fix(password: str) -> str:
    return _REPEAT.sub(lambda m: m.group(1) + "9" + m.group(1), password)


def char_variety_fix(password: str) -> str:
    result = password
    if not re.search(r"[A-Z]", result):
        result += "A"
    if not re.search(r"[a-z]", result):
        result += "a"
    if not re.search(r"[0-9]", result):
        result += "9"
    if not re.search(r"[!@#$%]", result):
        result += "!"
    return result


def structure_addition(password: str) -> str:
    return password[:-1] + "-" + password[-1:]


def length_increase(password: str, today: Optional[date] = None) -> str:
    year = (today or date.today()).year
    return password + "X" + str(year)[-2:]


REWRITERS: Dict[str, Callable[[str], str]] = {
    "sequence-replace": sequence_replacement,
    "keyboard-walks": keyboard_walk_fix,
    "add-entropy": entropy_boost,
    "reduce-repetition": repetition_fix,
    "char-variety": char_variety_fix,
    "add-structure": structure_addition,
    "increase-length": length_increase,
}


def rewrite_example(password: str, suggestion: Suggestion) -> str:
    """
    Show the suggestion applied to the user's own password. Suggestions
    without a rewriter fall back to their canned example.
    """
    rewriter = REWRITERS.get(suggestion.id)
    if rewriter is None:
        return suggestion.example
    return rewriter(password)
