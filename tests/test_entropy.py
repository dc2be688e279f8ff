from intentpass.entropy import (
    analyze_entropy,
    balance_score,
    character_class_distribution,
    detect_repetition,
    entropy_value,
)


def test_repetition_of_four():
    result = analyze_entropy("aaaa")
    assert result.has_consecutive_repetition
    assert result.repetition_patterns == ["aaaa (4x)"]


def test_two_repeats_are_allowed():
    has_rep, patterns = detect_repetition("aabbcc")
    assert not has_rep
    assert patterns == []


def test_multiple_runs_recorded_in_order():
    has_rep, patterns = detect_repetition("xaaabbbbx111")
    assert has_rep
    assert patterns == ["aaa (3x)", "bbbb (4x)", "111 (3x)"]


def test_distribution_sums_to_length():
    for pw in ["", "Ab1!", "hello world", "PASSword123$$", "ü€x"]:
        dist = character_class_distribution(pw)
        assert dist.uppercase + dist.lowercase + dist.digits + dist.symbols == len(pw)


def test_distribution_counts():
    dist = character_class_distribution("AB cd 12")
    assert dist.uppercase == 2
    assert dist.lowercase == 2
    assert dist.digits == 2
    assert dist.symbols == 2


def test_balance_score_bounds():
    assert balance_score(character_class_distribution("Ab1!")) == 1.0
    assert balance_score(character_class_distribution("abcd")) == 0.0
    assert balance_score(character_class_distribution("")) == 0.0
    half = balance_score(character_class_distribution("ab12"))
    assert abs(half - 0.5) < 1e-9


def test_entropy_value():
    assert entropy_value("") == 0.0
    assert entropy_value("a") == 0.0
    assert entropy_value("aaaa") == 0.0
    assert abs(entropy_value("abcd") - 1.0) < 1e-9
    v = entropy_value("aabb")
    assert 0.0 < v <= 1.0


def test_entropy_value_never_exceeds_one():
    # more distinct characters than the printable-ASCII ceiling
    pw = "".join(chr(0x4E00 + i) for i in range(120))
    assert entropy_value(pw) == 1.0
