# intentpass/config.py
"""
Simple settings persistence for IntentPass.
Settings saved as JSON in %APPDATA%/IntentPass/config.json (Windows) or ~/.intentpass/config.json (fallback).
INTENTPASS_CONFIG points at an explicit file instead.

Only settings live here; analysed passwords are never written to disk.
"""

import json
import logging
import os
from typing import Any, Dict

from .breach import BreachChecker, BreachCache, DEFAULT_USER_AGENT, HIBP_API_BASE
from .policy import Policy, get_policy

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "policy_mode": "CONSUMER",
    "breach_check_enabled": False,
    "breach_cache_ttl_seconds": 3600,
    "breach_api_url": HIBP_API_BASE,
    "breach_timeout_seconds": 10.0,
    "user_agent": DEFAULT_USER_AGENT,
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "IntentPass")
    else:
        d = os.path.join(os.path.expanduser("~"), ".intentpass")
    return d


def config_path() -> str:
    explicit = os.getenv("INTENTPASS_CONFIG")
    if explicit:
        return explicit
    return os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("could not read %s, using defaults: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out


def save_config(cfg: Dict[str, Any]) -> str:
    p = config_path()
    d = os.path.dirname(p)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)
    return p


def policy_from_config(cfg: Dict[str, Any]) -> Policy:
    return get_policy(cfg.get("policy_mode") or DEFAULTS["policy_mode"])


def breach_checker_from_config(cfg: Dict[str, Any]) -> BreachChecker:
    return BreachChecker(
        cache=BreachCache(ttl_seconds=float(cfg.get("breach_cache_ttl_seconds", 3600))),
        api_url=cfg.get("breach_api_url") or HIBP_API_BASE,
        timeout=float(cfg.get("breach_timeout_seconds", 10.0)),
        user_agent=cfg.get("user_agent") or DEFAULT_USER_AGENT,
    )
