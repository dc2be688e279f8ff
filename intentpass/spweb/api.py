from typing import Optional

from flask import Flask, jsonify, request

from intentpass.breach import BreachChecker
from intentpass.config import breach_checker_from_config, load_config
from intentpass.policy import PolicyMode, check_password, get_policy
from intentpass.report import build_report, entropy_percent, intentionality_percent
from intentpass.scorer import analyze_password


def _json_object():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _password_from(data):
    password = data.get("password")
    if not isinstance(password, str):
        return None
    return password


def create_app(breach_checker: Optional[BreachChecker] = None) -> Flask:
    app = Flask(__name__)
    checker = breach_checker

    def get_checker() -> BreachChecker:
        nonlocal checker
        if checker is None:
            checker = breach_checker_from_config(load_config())
        return checker

    @app.route("/")
    def home():
        return jsonify({"message": "IntentPass API is running"})

    @app.route("/analyze", methods=["POST"])
    def analyze_route():
        data = _json_object()
        password = _password_from(data)
        if password is None:
            return jsonify({"error": "'password' must be a string"}), 400
        policy = None
        if data.get("mode"):
            try:
                policy = get_policy(data["mode"])
            except ValueError:
                return jsonify({"error": f"unknown policy mode: {data['mode']}"}), 400
        report = build_report(password, policy=policy)
        return jsonify(report.model_dump(mode="json", by_alias=True))

    @app.route("/policy", methods=["POST"])
    def policy_route():
        data = _json_object()
        password = _password_from(data)
        if password is None:
            return jsonify({"error": "'password' must be a string"}), 400
        try:
            policy = get_policy(data.get("mode") or PolicyMode.CONSUMER)
        except ValueError:
            return jsonify({"error": f"unknown policy mode: {data.get('mode')}"}), 400
        analysis = analyze_password(password)
        result = check_password(
            policy, password, intentionality_percent(analysis), entropy_percent(analysis)
        )
        return jsonify(result.model_dump(mode="json", by_alias=True))

    @app.route("/breach", methods=["POST"])
    def breach_route():
        data = _json_object()
        password = _password_from(data)
        if password is None:
            return jsonify({"error": "'password' must be a string"}), 400
        result = get_checker().check(password)
        return jsonify(result.model_dump(mode="json", by_alias=True))

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
