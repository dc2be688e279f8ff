import json

import pytest

from intentpass.breach import BreachCache, BreachChecker
from intentpass.spweb.api import create_app


class FakeResponse:
    status_code = 200
    text = "1E4C9B93F3F0682250B6CF8331B7EE68FD8:7\n"


class FakeSession:
    def get(self, url, headers=None, timeout=None):
        return FakeResponse()


def client():
    checker = BreachChecker(session=FakeSession(), cache=BreachCache())
    return create_app(breach_checker=checker).test_client()


def test_home():
    resp = client().get("/")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "IntentPass API is running"


def test_analyze():
    resp = client().post("/analyze", json={"password": "qwerty123"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["analysis"]["length"] == 9
    assert 0 <= data["analysis"]["overallScore"] <= 100
    assert data["classification"]["classification"] == "PREDICTABLE"
    assert data["policy"] is None


def test_analyze_with_policy_mode():
    resp = client().post("/analyze", json={"password": "qwerty123", "mode": "enterprise"})
    assert resp.status_code == 200
    assert resp.get_json()["policy"]["passes"] is False


def test_analyze_rejects_bad_input():
    c = client()
    assert c.post("/analyze", json={}).status_code == 400
    assert c.post("/analyze", json={"password": 123}).status_code == 400
    assert c.post("/analyze", data="not json").status_code == 400
    assert c.post("/analyze", json={"password": "x", "mode": "nope"}).status_code == 400


def test_analyze_empty_password():
    resp = client().post("/analyze", json={"password": ""})
    assert resp.status_code == 200
    assert resp.get_json()["analysis"]["overallScore"] == 0


def test_policy_route():
    resp = client().post("/policy", json={"password": "short"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["passes"] is False
    assert "Password must be at least 8 characters" in data["violations"]


def test_breach_route():
    resp = client().post("/breach", json={"password": "password"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["isBreached"] is True
    assert data["breachCount"] == 7
    assert client().post("/breach", json={}).status_code == 400


def test_analyze_long_password_is_strict_json():
    resp = client().post("/analyze", json={"password": "aB1!" * 50})
    assert resp.status_code == 200
    data = json.loads(resp.get_data(as_text=True), parse_constant=_reject_constant)
    assert data["adversarial"]["bruteForce"]["estimatedTime"] == "Infeasible (10B+ years)"


def _reject_constant(name):
    raise ValueError(f"non-standard JSON constant {name}")


@pytest.mark.parametrize("route", ["/analyze", "/policy", "/breach"])
def test_non_object_body_is_rejected(route):
    c = client()
    assert c.post(route, json=["x"]).status_code == 400
    assert c.post(route, json="password").status_code == 400
