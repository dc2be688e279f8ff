import json
import os
import tempfile

from intentpass.breach import HIBP_API_BASE
from intentpass.config import (
    DEFAULTS,
    breach_checker_from_config,
    config_path,
    load_config,
    policy_from_config,
    save_config,
)
from intentpass.policy import CONSUMER_POLICY, ENTERPRISE_POLICY


def test_missing_file_gives_defaults(monkeypatch):
    with tempfile.TemporaryDirectory() as td:
        monkeypatch.setenv("INTENTPASS_CONFIG", os.path.join(td, "config.json"))
        assert load_config() == DEFAULTS


def test_save_and_load_merges_defaults(monkeypatch):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "nested", "config.json")
        monkeypatch.setenv("INTENTPASS_CONFIG", path)
        assert config_path() == path
        assert save_config({"policy_mode": "ENTERPRISE"}) == path
        cfg = load_config()
        assert cfg["policy_mode"] == "ENTERPRISE"
        assert cfg["breach_check_enabled"] is False
        assert cfg["breach_api_url"] == HIBP_API_BASE


def test_unreadable_config_falls_back(monkeypatch):
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "config.json")
        monkeypatch.setenv("INTENTPASS_CONFIG", path)
        with open(path, "w", encoding="utf-8") as f:
            f.write("{not json")
        assert load_config() == DEFAULTS

        with open(path, "w", encoding="utf-8") as f:
            json.dump([1, 2, 3], f)
        assert load_config() == DEFAULTS


def test_default_location(monkeypatch):
    monkeypatch.delenv("INTENTPASS_CONFIG", raising=False)
    monkeypatch.setenv("APPDATA", os.path.join("C:", "Users", "me", "AppData"))
    assert config_path() == os.path.join("C:", "Users", "me", "AppData", "IntentPass", "config.json")


def test_policy_from_config():
    assert policy_from_config(DEFAULTS) is CONSUMER_POLICY
    assert policy_from_config({"policy_mode": "enterprise"}) is ENTERPRISE_POLICY
    assert policy_from_config({}) is CONSUMER_POLICY


def test_breach_checker_from_config():
    checker = breach_checker_from_config(
        dict(DEFAULTS, breach_cache_ttl_seconds=5, breach_api_url="http://localhost/range")
    )
    assert checker.cache.ttl_seconds == 5.0
    assert checker.api_url == "http://localhost/range/"
    assert checker.timeout == 10.0
