# projectdesk/utils/config.py
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
from .paths import config_dir

SEED_ENV = "PROJECTDESK_SEED"

_DEFAULTS: Dict[str, Any] = {
    "store": {
        "seed_sample_data": False,
        "id_strategy": "uuid",      # uuid | sequential
    },
    "logging": {
        "level": "INFO",
    },
}


def settings_file() -> Path:
    return config_dir() / "settings.json"


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = {k: (dict(v) if isinstance(v, dict) else v) for k, v in base.items()}
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def _env_flag(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or settings_file()
    data = _merge(_DEFAULTS, {})
    if path.exists():
        try:
            loaded = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            loaded = {}
        if isinstance(loaded, dict):
            data = _merge(_DEFAULTS, loaded)

    for section, defaults in _DEFAULTS.items():
        if not isinstance(data.get(section), dict):
            data[section] = dict(defaults)

    seed = os.environ.get(SEED_ENV)
    if seed is not None:
        data["store"]["seed_sample_data"] = _env_flag(seed)
    return data


def save_settings(data: Dict[str, Any], path: Optional[Path] = None) -> None:
    path = path or settings_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
