from intentpass.classifier import EXPLANATIONS, classify_password, normalize
from intentpass.models import BehavioralClass
from intentpass.scorer import analyze_password


def classify(pw):
    return classify_password(pw, analyze_password(pw))


def test_passphrase():
    result = classify("correct-horse-battery-staple")
    assert result.classification == BehavioralClass.PASSPHRASE
    assert result.confidence == 100
    assert result.likelihood.passphrase == 100
    assert result.explanation == EXPLANATIONS[BehavioralClass.PASSPHRASE]


def test_keyboard_walk_is_predictable():
    result = classify("qwerty123")
    assert result.classification == BehavioralClass.PREDICTABLE
    assert result.likelihood.predictable == 100


def test_compliance_hack():
    # upper, lower, digit and 12+ chars, but no intentional structure
    result = classify("Zxkqmtprsdwfh7")
    assert result.classification == BehavioralClass.COMPLIANCE_HACK
    assert result.confidence == 100


def test_no_signal_falls_back_to_even_split():
    result = classify("Xk9#mQ2$")
    assert result.classification == BehavioralClass.BALANCED
    assert result.confidence == 20
    lk = result.likelihood
    assert [lk.predictable, lk.random, lk.passphrase, lk.compliance_hack, lk.balanced] == [20] * 5


def test_predictable_and_compliance_split():
    result = classify("Qwerty123!")
    assert result.classification == BehavioralClass.PREDICTABLE
    assert result.likelihood.compliance_hack > 0
    assert result.likelihood.predictable > result.likelihood.compliance_hack


def test_likelihood_sums_to_about_100():
    for pw in ["a", "password", "Qwerty123!", "Tr0ub4dor&3", "correct horse battery staple", "Zk#8"]:
        total = classify(pw).likelihood.total
        assert 98 <= total <= 102


def test_confidence_is_the_winning_likelihood():
    for pw in ["qwerty123", "correct-horse-battery-staple", "Xk9#mQ2$"]:
        result = classify(pw)
        lk = result.likelihood.model_dump()
        key = result.classification.value.lower()
        assert result.confidence == lk[key]


def test_normalize_zero_total():
    scores = {cls: 0.0 for cls in BehavioralClass}
    assert set(normalize(scores).values()) == {20.0}
