from __future__ import annotations

from pathlib import Path

import pytest

from shapekit import _config
from shapekit.builder import ShapeBuilder
from shapekit.colors import PaletteResolver

PROJECT_ROOT = Path(__file__).resolve().parents[1]

TEST_PALETTE = {
    "red": 0xFFFF0000,
    "green": 0xFF00FF00,
    "blue": 0xFF0000FF,
    "accent": "#80123456",
    7: 0xFF777777,
}


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config layer at a throwaway directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "shapekit.cfg")
    monkeypatch.delenv(_config.DENSITY_ENV_VAR, raising=False)
    return config_dir


@pytest.fixture
def resolver() -> PaletteResolver:
    return PaletteResolver(TEST_PALETTE)


@pytest.fixture
def builder(resolver: PaletteResolver) -> ShapeBuilder:
    return ShapeBuilder(density=2.0, resolver=resolver)


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT
