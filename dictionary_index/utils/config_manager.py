# config_manager.py - JSON config manager

import json
import logging
import os

from dictionary_index.errors import ConfigError
from dictionary_index.utils.dictionary_store import DICT_FILE, PersistPolicy

logger = logging.getLogger(__name__)

DEFAULTS = {
    "dictionary_path": DICT_FILE,
    "persist_policy": PersistPolicy.REWRITE.value,  # or "append"
    "default_method": "bst",  # or "hashmap"
    "max_suggestions": 10,
    "hash_capacity": 1024,
    "hash_resize": True,
    "log_file": None,
}

_CHOICES = {
    "persist_policy": {p.value for p in PersistPolicy},
    "default_method": {"bst", "hashmap"},
}


def _canonical(key, val):
    """Choice options are case-insensitive; store them lowercase."""
    if key in _CHOICES and isinstance(val, str):
        return val.strip().lower()
    return val


def _coerce(key, current, val):
    """Convert a raw value (often a CLI string) to the type of the default."""
    if key in _CHOICES:
        return _canonical(key, val)
    if current is None:
        return val
    if isinstance(current, bool) and isinstance(val, str):
        low = val.strip().lower()
        if low in ("1", "true", "yes", "on"):
            return True
        if low in ("0", "false", "no", "off"):
            return False
        raise ConfigError(f"{key}: expected a boolean, got {val!r}")
    try:
        return type(current)(val)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key}: {e}") from e


class Config:
    """
    Settings for the dictionary tools.
    Read from a JSON file when present; the file is only written by save()/set().
    """

    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.path, e)
            return
        if not isinstance(raw, dict):
            logger.warning("ignoring config %s: top level is not an object", self.path)
            return
        for k, v in raw.items():
            if k not in self.data:
                logger.warning("unknown config option %r in %s", k, self.path)
                continue
            v = _canonical(k, v)
            try:
                self._validate(k, v)
            except ConfigError as e:
                logger.warning("keeping default for %s", e)
                continue
            self.data[k] = v

    def _validate(self, key, val):
        allowed = _CHOICES.get(key)
        if allowed is not None and (not isinstance(val, str) or val not in allowed):
            raise ConfigError(f"{key} must be one of {sorted(allowed)}, got {val!r}")
        if key in ("max_suggestions", "hash_capacity") and (
            isinstance(val, bool) or not isinstance(val, int) or val <= 0
        ):
            raise ConfigError(f"{key} must be a positive integer, got {val!r}")
        if key == "hash_resize" and not isinstance(val, bool):
            raise ConfigError(f"hash_resize must be true or false, got {val!r}")
        if key == "dictionary_path" and (not isinstance(val, str) or not val.strip()):
            raise ConfigError(f"dictionary_path must be a non-empty path, got {val!r}")
        if key == "log_file" and val is not None and not isinstance(val, str):
            raise ConfigError(f"log_file must be a path or null, got {val!r}")

    def get(self, key, default=None):
        return self.data.get(key, default)

    def __getitem__(self, key):
        return self.data[key]

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self):
        for k, v in self.data.items():
            print(f"{k:15} = {v}")

    def set(self, key, val):
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        val = _coerce(key, DEFAULTS[key], val)
        self._validate(key, val)
        self.data[key] = val
        self.save()

    @property
    def persist_policy(self) -> PersistPolicy:
        return PersistPolicy.parse(self.data["persist_policy"])
