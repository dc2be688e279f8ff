import pytest

from intentpass.policy import (
    CONSUMER_POLICY,
    ENTERPRISE_POLICY,
    PolicyMode,
    check_password,
    get_policy,
    longest_run,
)


def test_presets():
    assert CONSUMER_POLICY.min_length == 8
    assert not CONSUMER_POLICY.enforce_intentionality
    assert ENTERPRISE_POLICY.min_length == 14
    assert ENTERPRISE_POLICY.max_repeat_length == 2
    assert ENTERPRISE_POLICY.min_intentionality_score == 50


def test_get_policy():
    assert get_policy(PolicyMode.ENTERPRISE) is ENTERPRISE_POLICY
    assert get_policy("consumer") is CONSUMER_POLICY
    assert get_policy("ENTERPRISE") is ENTERPRISE_POLICY
    with pytest.raises(ValueError):
        get_policy("bogus")


def test_consumer_length_violation():
    result = check_password(CONSUMER_POLICY, "short", score=50, entropy=80)
    assert not result.passes
    assert result.violations == ["Password must be at least 8 characters"]


def test_consumer_pass():
    result = check_password(CONSUMER_POLICY, "LongEnough", score=0, entropy=50)
    assert result.passes
    assert result.violations == []


def test_consumer_low_entropy():
    result = check_password(CONSUMER_POLICY, "LongEnough", score=0, entropy=10)
    assert result.violations == ["Entropy must be at least 30"]


def test_enterprise_rejects_common_password():
    result = check_password(ENTERPRISE_POLICY, "password", score=10, entropy=10)
    assert not result.passes
    assert "Password must be at least 14 characters" in result.violations
    assert "Must contain uppercase letter" in result.violations
    assert "Must contain number" in result.violations
    assert "Must contain special character" in result.violations
    assert "Must not contain common words (password, pass)" in result.violations
    assert "Intentionality score must be at least 50" in result.violations


def test_enterprise_pattern_rules():
    result = check_password(ENTERPRISE_POLICY, "Qwerty123!aaaXyz", score=90, entropy=90)
    assert "Must not contain sequential characters" in result.violations
    assert "Must not contain keyboard walks" in result.violations
    assert "Must not repeat a character more than 2 times in a row" in result.violations


def test_enterprise_pass():
    result = check_password(ENTERPRISE_POLICY, "Zx7#Kq9!Mt4$Wp", score=80, entropy=90)
    assert result.passes, result.violations


def test_longest_run():
    assert longest_run("") == 0
    assert longest_run("abc") == 1
    assert longest_run("abbbcc") == 3


def test_get_policy_accepts_mode_or_name():
    assert get_policy(PolicyMode.CONSUMER) is get_policy("Consumer")
