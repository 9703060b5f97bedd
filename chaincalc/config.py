"""Configuration management — JSON-based, stored in ~/.config/chaincalc/."""
import json
from pathlib import Path

DEFAULT_CONFIG = {
    "debug_logging": False,
    "prompt": "> ",
    "show_history": False,  # print the step list after every command
}

CONFIG_DIR = Path.home() / ".config" / "chaincalc"
CONFIG_FILE = CONFIG_DIR / "config.json"


class Config:
    def __init__(self, path=None):
        self._path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self):
        if self._path.exists():
            try:
                with open(self._path, "r", encoding="utf-8") as f:
                    stored = json.load(f)
            except (ValueError, OSError):
                return
            if not isinstance(stored, dict):
                return
            for key, value in stored.items():
                # known keys must keep the type of their default
                default = DEFAULT_CONFIG.get(key)
                if default is not None and type(value) is not type(default):
                    continue
                self._data[key] = value

    def save(self):
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    @property
    def debug_logging(self):
        return self._data["debug_logging"]

    @debug_logging.setter
    def debug_logging(self, val):
        self._data["debug_logging"] = bool(val)
        self.save()

    @property
    def prompt(self):
        return self._data["prompt"]

    @property
    def show_history(self):
        return self._data["show_history"]

    @show_history.setter
    def show_history(self, val):
        self._data["show_history"] = bool(val)
        self.save()
