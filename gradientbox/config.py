"""
Load and expose app config (YAML). Used by the generator and CLI for box defaults and extra palettes.
"""
from pathlib import Path
from typing import Any

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return {**_defaults(), **data}


def _defaults() -> dict[str, Any]:
    return {
        "gradient": {
            "palette": "warm_sunset",
            "type": "linear",
            "contrast": "ambient",
            "angle": 45,
            "animated": False,
            "animation_duration": 8,
            "noise": False,
            "noise_color": "#ffffff",
            "noise_intensity": 0.3,
            "noise_type": "subtle",
            "palettes": {},
        },
    }


def resolve_box_config(config: dict[str, Any]) -> dict[str, Any]:
    """Merged `gradient` section: built-in defaults overridden by whatever the config sets."""
    out = dict(_defaults()["gradient"])
    section = config.get("gradient") or {}
    out.update(section)
    out["palettes"] = dict(section.get("palettes") or {})
    return out
