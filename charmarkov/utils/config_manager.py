# config_manager.py - JSON config manager

import codecs
import json
import os
from typing import Any, Dict, List, Optional


class ConfigError(ValueError):
    """Raised for malformed model or CLI configuration."""


DEFAULTS: Dict[str, Any] = {
    "window_length": 3,
    "seed": None,  # None -> unseeded, non-deterministic generation
    "length": 100,  # characters appended by generate
    "encoding": "utf-8",
    "log_level": "WARNING",
}

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def check_window_length(value: Any) -> int:
    """Validate a window length; bools are rejected even though they are ints."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"window_length must be an integer, got {value!r}")
    if value < 1:
        raise ConfigError(f"window_length must be >= 1, got {value}")
    return value


class Config:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{self.path}: invalid JSON ({e})") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{self.path}: expected a JSON object")
        for k, v in loaded.items():
            self._check(k, v)
        self.data.update(loaded)

    def save(self):
        if not self.path:
            return
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def show(self) -> List[str]:
        return [f"{k:15} = {v}" for k, v in self.data.items()]

    def get(self, key: str) -> Any:
        if key not in self.data:
            raise ConfigError(f"no such option: {key}")
        return self.data[key]

    def set(self, key: str, val: Any):
        self.override(key, val)
        self.save()

    def override(self, key: str, val: Any):
        """Validate and apply a value for this run only; nothing is saved."""
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        val = self._coerce(key, val)
        self._check(key, val)
        self.data[key] = val

    @staticmethod
    def _coerce(key: str, val: Any) -> Any:
        # values arriving from the command line are strings
        if not isinstance(val, str):
            return val
        if key == "seed":
            return None if val.lower() in ("", "none", "null") else _to_int(key, val)
        if key in ("window_length", "length"):
            return _to_int(key, val)
        if key == "log_level":
            return val.upper()
        return val

    @staticmethod
    def _check(key: str, val: Any):
        if key not in DEFAULTS:
            raise ConfigError(f"no such option: {key}")
        if key == "window_length":
            check_window_length(val)
        elif key == "length":
            if isinstance(val, bool) or not isinstance(val, int) or val < 0:
                raise ConfigError(f"length must be a non-negative integer, got {val!r}")
        elif key == "seed":
            if val is not None and (isinstance(val, bool) or not isinstance(val, int)):
                raise ConfigError(f"seed must be an integer or null, got {val!r}")
        elif key == "log_level":
            if val not in _LOG_LEVELS:
                raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        elif key == "encoding":
            if not isinstance(val, str) or not val:
                raise ConfigError("encoding must be a non-empty string")
            try:
                codecs.lookup(val)
            except LookupError:
                raise ConfigError(f"unknown encoding: {val}") from None


def _to_int(key: str, val: str) -> int:
    try:
        return int(val)
    except ValueError:
        raise ConfigError(f"{key} expects an integer, got {val!r}") from None
