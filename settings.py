# settings.py
"""
Settings document loading.

A settings document lists the wheels in stack order and the plugboard
pairs::

    wheels:
      - {name: I, position: 0}
      - {name: II, position: 0}
      - {name: III, position: 0}
      - {name: Reflector B}
    plugs:
      A: B

YAML is read with PyYAML; ``.json`` files are read with json.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from debug import Debug
from enigma import Enigma
from errors import SettingsError

debug = Debug()


@dataclass
class Settings:
    """Wheel list and plug pairs, as read from a document."""
    wheels: List[Tuple[str, int | str]]
    plugs: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "wheels": [{"name": n, "position": p} for n, p in self.wheels],
            "plugs": dict(self.plugs),
        }


def parse_settings(data: Any) -> Settings:
    if not isinstance(data, dict):
        raise SettingsError("Settings document must be a mapping")
    if "wheels" not in data:
        raise SettingsError("Missing key in settings: wheels")

    raw_wheels = data["wheels"]
    if not isinstance(raw_wheels, list):
        raise SettingsError("'wheels' must be a list")

    wheels: List[Tuple[str, int | str]] = []
    for idx, entry in enumerate(raw_wheels):
        if not isinstance(entry, dict) or "name" not in entry:
            raise SettingsError(f"wheels[{idx}] needs a 'name'")
        wheels.append((str(entry["name"]), entry.get("position", 0)))

    raw_plugs = data.get("plugs") or {}
    if not isinstance(raw_plugs, dict):
        raise SettingsError("'plugs' must be a mapping of letter pairs")
    plugs = {str(a): str(b) for a, b in raw_plugs.items()}

    debug.log("settings", f"{len(wheels)} wheels, {len(plugs)} plugs")
    return Settings(wheels, plugs)


def load_settings(path: str | Path) -> Settings:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SettingsError(f"Cannot read {path}: {e}") from e
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SettingsError(f"Cannot parse {path}: {e}") from e
    debug.log("settings", f"loaded {path}")
    return parse_settings(data)


def save_settings(settings: Settings, path: str | Path) -> None:
    path = Path(path)
    if path.suffix.lower() == ".json":
        text = json.dumps(settings.to_dict(), indent=2)
    else:
        text = yaml.safe_dump(settings.to_dict(), sort_keys=False)
    path.write_text(text, encoding="utf-8")


def build_machine(settings: Settings) -> Enigma:
    return Enigma.configure(settings.wheels, settings.plugs)
