from __future__ import annotations

import json
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from shapekit.colors import DEFAULT_PALETTE

CONFIG_DIR = Path.home() / ".shapekit"
CONFIG_FILE = CONFIG_DIR / "shapekit.cfg"
DENSITY_ENV_VAR = "SHAPEKIT_DENSITY"
DEFAULT_CONFIG = {
    "_comment": "density: ldpi, mdpi (default), hdpi, xhdpi, xxhdpi, xxxhdpi, '<n>dpi' or a positive number.",
    "density": "mdpi",
    "palette": {},
}
_BASELINE_DPI = 160.0
_DENSITY_BUCKETS: Dict[str, float] = {
    "ldpi": 0.75,
    "mdpi": 1.0,
    "hdpi": 1.5,
    "xhdpi": 2.0,
    "xxhdpi": 3.0,
    "xxxhdpi": 4.0,
}


@dataclass(frozen=True)
class DensitySettings:
    """Resolved display density from shapekit.cfg or the environment."""

    name: str
    density: float


def ensure_user_config() -> None:
    """Ensure ~/.shapekit/shapekit.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def parse_density(value: object) -> DensitySettings | None:
    """Interpret a bucket name, ``<n>dpi`` string or number as a density."""

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        density = float(value)
        if not math.isfinite(density) or density <= 0:
            return None
        return DensitySettings(name=f"{density:g}x", density=density)
    if not isinstance(value, str):
        return None

    key = value.strip().lower()
    if key in _DENSITY_BUCKETS:
        return DensitySettings(name=key, density=_DENSITY_BUCKETS[key])
    if key.endswith("dpi"):
        try:
            dpi = float(key[:-3])
        except ValueError:
            return None
        if not math.isfinite(dpi) or dpi <= 0:
            return None
        return DensitySettings(name=key, density=dpi / _BASELINE_DPI)
    try:
        return parse_density(float(key))
    except ValueError:
        return None


def get_density_settings() -> DensitySettings:
    """Return the configured density, preferring $SHAPEKIT_DENSITY."""

    override = os.environ.get(DENSITY_ENV_VAR)
    if override:
        settings = parse_density(override)
        if settings is not None:
            return settings

    raw_config = _load_user_config()
    settings = parse_density(raw_config.get("density", DEFAULT_CONFIG["density"]))
    if settings is None:
        settings = parse_density(DEFAULT_CONFIG["density"])
    return settings


def default_density() -> float:
    return get_density_settings().density


def get_palette() -> Dict[str, int | str]:
    """Return the built-in palette merged with the configured overrides."""

    palette: Dict[str, int | str] = dict(DEFAULT_PALETTE)
    overrides = _load_user_config().get("palette", {})
    if isinstance(overrides, dict):
        palette.update({str(name): value for name, value in overrides.items()})
    return palette
