import math

from intentpass.adversarial import (
    analyze_adversarial,
    attack_vulnerabilities,
    brute_force_space,
    dictionary_resistance,
    estimate_charset_size,
    estimate_time,
)
from intentpass.scorer import analyze_password


def attack(pw):
    return analyze_adversarial(pw, analyze_password(pw))


def test_overall_is_weakest_link():
    for pw in ["a", "password", "qwerty123", "Tr0ub4dor&3", "correct-horse-battery-staple", "X7f!9Lq@2Vb#tR4sYp"]:
        result = attack(pw)
        assert result.overall_resistance == min(s.resistance_percentage for s in result.scenarios())
        for s in result.scenarios():
            assert 0 <= s.resistance_percentage <= 100


def test_dictionary_word():
    result = attack("password")
    assert result.dictionary_attack.resistance_percentage == 30
    assert result.dictionary_attack.estimated_time == "Less than 1 second"
    assert result.keyboard_walk_attack.resistance_percentage == 100
    assert result.frequency_analysis.resistance_percentage == 92
    assert result.markov_chain.resistance_percentage == 100
    assert result.brute_force.estimated_time == "2 minutes"
    # min(99, entropy_value / 128 * 100) rounds to 1
    assert result.brute_force.resistance_percentage == 1


def test_walks_and_sequences():
    result = attack("qwerty123")
    assert result.keyboard_walk_attack.resistance_percentage == 20
    assert result.markov_chain.resistance_percentage == 60
    assert "Contains 7 potential walks." in result.keyboard_walk_attack.explanation
    assert attack_vulnerabilities(result) == [
        "Contains keyboard walk patterns",
        "Predictable character sequences",
    ]


def test_dictionary_resistance():
    assert dictionary_resistance("MyDragon") == 30
    assert dictionary_resistance("abcdefghij") == 50
    assert dictionary_resistance("Zq7!") == 80
    assert dictionary_resistance("Zq7") == 70
    assert dictionary_resistance("") == 55


def test_charset_size():
    assert estimate_charset_size("") == 26
    assert estimate_charset_size("abc") == 26
    assert estimate_charset_size("aB") == 52
    assert estimate_charset_size("aB1!") == 94


def test_estimate_time():
    assert estimate_time(1) == ("Less than 1 second", 0.0)
    assert estimate_time(60e9) == ("30 seconds", 30.0)
    label, seconds = estimate_time(2 * 1e9 * 3 * 3600)
    assert label == "3 hours"
    assert seconds == 3 * 3600


def test_huge_search_space_is_infeasible():
    space = brute_force_space(94, 200)
    assert space == math.inf
    label, _ = estimate_time(space)
    assert label == "Infeasible (10B+ years)"
    assert attack("aB1!" * 50).brute_force.estimated_time == "Infeasible (10B+ years)"


def test_empty_password_does_not_raise():
    result = attack("")
    assert result.dictionary_attack.resistance_percentage == 55
    assert result.frequency_analysis.resistance_percentage == 40


def test_no_vulnerabilities_message():
    result = attack("Xk9#mQ2$")
    assert attack_vulnerabilities(result) == ["No major vulnerabilities detected"]


def test_infeasible_time_is_finite():
    label, seconds = estimate_time(math.inf)
    assert label == "Infeasible (10B+ years)"
    assert math.isfinite(seconds)
    assert math.isfinite(attack("aB1!" * 50).brute_force.time_in_seconds)
