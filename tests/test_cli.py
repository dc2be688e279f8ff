import os

import pytest

from intentpass.cli import main


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.setenv("INTENTPASS_CONFIG", os.path.join(str(tmp_path), "config.json"))


def test_analyze(capsys):
    main(["analyze", "qwerty123"])
    out = capsys.readouterr().out
    assert "Score:" in out
    assert "Contains keyboard pattern" in out
    assert "PREDICTABLE" in out


def test_analyze_json(capsys):
    main(["analyze", "Ab2!", "--json"])
    out = capsys.readouterr().out
    assert '"overallScore"' in out
    assert '"radar"' in out


def test_analyze_with_policy(capsys):
    main(["analyze", "qwerty123", "--policy", "enterprise"])
    out = capsys.readouterr().out
    assert "Violates the enterprise policy" in out


def test_attack(capsys):
    main(["attack", "password"])
    out = capsys.readouterr().out
    assert "Overall resistance" in out
    assert "Vulnerable to dictionary attacks" in out


def test_benchmark(capsys):
    main(["benchmark", "Password1!"])
    out = capsys.readouterr().out
    assert "Rule-Based Validator" in out
    assert "IntentPass" in out


def test_config(capsys):
    main(["config"])
    out = capsys.readouterr().out
    assert "policy_mode" in out


def test_missing_command():
    with pytest.raises(SystemExit):
        main([])
