from __future__ import annotations

import json
import os
from typing import Any

from data import config


class SettingsError(Exception): ...


DEFAULTS: dict[str, Any] = {
    "default_label": "bc",
    "log_level": "INFO",
    "benchmark_rounds": 10000,
    "strings_file": "strings.txt",
    "payloads_file": "payloads.txt",
}


class Settings:
    """Process-wide settings read from ``files/settings.json``."""

    _instance: Settings | None = None

    default_label: str
    log_level: str
    benchmark_rounds: int
    strings_file: str
    payloads_file: str

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def _load(self) -> None:
        data: dict[str, Any] = {}
        if os.path.isfile(config.SETTINGS_FILE):
            with open(config.SETTINGS_FILE, encoding="utf-8") as f:
                try:
                    data = json.load(f)
                except json.JSONDecodeError as e:
                    raise SettingsError(f"{config.SETTINGS_FILE} is not valid JSON: {e}") from e
            if not isinstance(data, dict):
                raise SettingsError(f"{config.SETTINGS_FILE} must hold a JSON object")

        for key, default in DEFAULTS.items():
            value = data.get(key, default)
            if type(value) is not type(default):
                raise SettingsError(f"setting '{key}' must be {type(default).__name__}, got {type(value).__name__}")
            setattr(self, key, value)

        if self.benchmark_rounds <= 0:
            raise SettingsError("setting 'benchmark_rounds' must be positive")
