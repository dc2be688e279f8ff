from datetime import date

from intentpass.models import BehavioralClass, SuggestionImpact
from intentpass.scorer import analyze_password
from intentpass.suggestions import (
    IMPACT_ORDER,
    char_variety_fix,
    character_types,
    entropy_boost,
    generate_suggestions,
    keyboard_walk_fix,
    length_increase,
    repetition_fix,
    rewrite_example,
    sequence_replacement,
    structure_addition,
)


def suggest(pw, classification=BehavioralClass.BALANCED):
    return generate_suggestions(pw, analyze_password(pw), classification)


def test_suggestions_for_repeated_letters():
    ids = [s.id for s in suggest("aaa")]
    assert ids == ["add-entropy", "char-variety", "increase-length", "reduce-repetition"]


def test_suggestions_for_predictable_password():
    ids = [s.id for s in suggest("qwerty123", BehavioralClass.PREDICTABLE)]
    assert ids == ["sequence-replace", "keyboard-walks", "add-entropy", "char-variety", "increase-length"]


def test_suggestions_ordered_by_impact():
    for pw in ["aaa", "P@ssw0rd", "correct-horse-battery-staple-extra", "qwerty123"]:
        ranks = [IMPACT_ORDER[s.impact] for s in suggest(pw, BehavioralClass.PASSPHRASE)]
        assert ranks == sorted(ranks)


def test_passphrase_suggestions():
    ids = [s.id for s in suggest("correct-horse-battery-staple", BehavioralClass.PASSPHRASE)]
    assert ids == ["add-entropy", "char-variety", "strong-substitution"]

    long_ids = [s.id for s in suggest("correct-horse-battery-staple-extra", BehavioralClass.PASSPHRASE)]
    assert long_ids[-1] == "shorten-passphrase"


def test_class_specific_suggestions():
    ids = [s.id for s in suggest("Zxkqmtprsdwfh7", BehavioralClass.COMPLIANCE_HACK)]
    assert ids == ["add-entropy", "intentional-redesign"]

    random_ids = [s.id for s in suggest("Zxkqmtprsdwfh7", BehavioralClass.RANDOM)]
    assert "add-structure" in random_ids
    assert "intentional-redesign" not in random_ids


def test_char_variety_message_mentions_count():
    variety = [s for s in suggest("abc") if s.id == "char-variety"][0]
    assert "only 1 character type" in variety.description
    assert variety.impact == SuggestionImpact.HIGH


def test_character_types():
    assert character_types("") == 0
    assert character_types("abc") == 1
    assert character_types("aB3!") == 4


def test_rewriters():
    assert sequence_replacement("abc123") == "a8c1!3"
    assert keyboard_walk_fix("qwerty") == "qx#werty"
    assert keyboard_walk_fix("qwertyasdf") == "qx#wertya$df"
    assert repetition_fix("aaab") == "a9ab"
    assert char_variety_fix("abc") == "abcA9!"
    assert structure_addition("abcd") == "abc-d"
    assert length_increase("abc", date(2024, 5, 1)) == "abcX24"


def test_rewrite_is_capped_at_two_extra_chars():
    pw = "abcdefxyz"
    assert len(sequence_replacement(pw)) <= len(pw) + 2


def test_entropy_boost_appends_symbol_and_digit():
    boosted = entropy_boost("weak")
    assert boosted.startswith("weak")
    assert len(boosted) == 6
    assert boosted[4] in "!@#$%^&*"
    assert boosted[5].isdigit()


def test_rewrite_example_uses_users_password():
    suggestions = {s.id: s for s in suggest("qwerty123", BehavioralClass.PREDICTABLE)}
    assert rewrite_example("qwerty123", suggestions["keyboard-walks"]) == "qx#werty123"
    assert rewrite_example("qwerty123", suggestions["sequence-replace"]) == "qwerty1!3"


def test_rewrite_example_falls_back_to_canned_example():
    s = [s for s in suggest("P@ssw0rd") if s.id == "strong-substitution"][0]
    assert rewrite_example("P@ssw0rd", s) == s.example
