"""
Computor — Local JSON storage for settings and solve history.

Data is persisted in ``<project>/data/computor.json``.
"""

import json
import logging
import os
import time
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "computor.json")

# ── Default settings ─────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "theme": "dark",               # graph palette: "dark" or "light"
    "show_steps": False,           # print the step-by-step trail
    "show_verification": False,    # include verification steps with the trail
    "max_decimals": None,          # None = shortest single-precision form
    "history_limit": 100,
}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _empty_db() -> dict:
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _load_db() -> dict:
    _ensure_dir()
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable %s: %s", _DATA_FILE, exc)
            return _empty_db()
        if not isinstance(db, dict):
            logger.warning("Ignoring malformed %s", _DATA_FILE)
            return _empty_db()
        if not isinstance(db.get("settings"), dict):
            db["settings"] = dict(DEFAULT_SETTINGS)
        if not isinstance(db.get("history"), list):
            db["history"] = []
        return db
    return _empty_db()


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return stored settings merged over the defaults."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update(_load_db()["settings"])
    return merged


def save_settings(settings: dict) -> None:
    """Persist *settings*; unknown keys are dropped."""
    db = _load_db()
    db["settings"] = {k: v for k, v in settings.items() if k in DEFAULT_SETTINGS}
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def add_history(equation: str, answer: str) -> None:
    """Record a solve, newest first, trimmed to ``history_limit``."""
    db = _load_db()
    record = {
        "equation": equation,
        "answer": answer,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    }
    db["history"].insert(0, record)
    limit = {**DEFAULT_SETTINGS, **db["settings"]}["history_limit"]
    db["history"] = db["history"][:limit]
    _save_db(db)


def get_history() -> list[dict]:
    """Return the history list (newest first)."""
    return _load_db()["history"]


def clear_history() -> None:
    db = _load_db()
    db["history"] = []
    _save_db(db)
