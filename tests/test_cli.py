from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from shapekit.cli import app

runner = CliRunner()


@pytest.fixture
def recipe_path(tmp_path):
    path = tmp_path / "badge.json"
    path.write_text(
        json.dumps(
            {
                "shape": "rectangle",
                "corner": 4,
                "gradient": {"start": "holo_blue_light", "end": "holo_blue_dark", "angle": 90},
                "stroke": {"color_text": "#FF000000", "width": 1},
            }
        )
    )
    return path


def test_show_prints_descriptor(recipe_path):
    result = runner.invoke(app, ["show", str(recipe_path), "--density", "xhdpi"])
    assert result.exit_code == 0, result.output
    assert "BOTTOM_TOP" in result.output
    assert "xhdpi" in result.output


def test_export_writes_drawable(tmp_path, recipe_path):
    output = tmp_path / "out" / "badge.xml"
    result = runner.invoke(app, ["export", str(recipe_path), "-o", str(output), "--density", "2"])
    assert result.exit_code == 0, result.output
    text = output.read_text()
    assert 'android:radius="8px"' in text
    assert 'android:width="2px"' in text


def test_export_never_clobbers_without_overwrite(tmp_path, recipe_path):
    output = tmp_path / "badge.xml"
    output.write_text("keep me")
    result = runner.invoke(app, ["export", str(recipe_path), "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert output.read_text() == "keep me"
    assert (tmp_path / "badge (1).xml").exists()

    result = runner.invoke(app, ["export", str(recipe_path), "-o", str(output), "--overwrite"])
    assert result.exit_code == 0, result.output
    assert output.read_text().startswith("<?xml")


def test_outline_writes_json(tmp_path, recipe_path):
    output = tmp_path / "outline.json"
    result = runner.invoke(
        app,
        ["outline", str(recipe_path), "--width", "40", "--height", "20", "-o", str(output), "--density", "mdpi"],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text())
    assert data["shape"] == "rectangle"
    assert data["size"] == [40.0, 20.0]
    assert "dashes" not in data


def test_outline_rejects_zero_size(recipe_path):
    result = runner.invoke(app, ["outline", str(recipe_path), "--width", "0", "--height", "20"])
    assert result.exit_code != 0


def test_missing_recipe_is_a_usage_error(tmp_path):
    result = runner.invoke(app, ["show", str(tmp_path / "missing.json")])
    assert result.exit_code != 0


def test_invalid_recipe_is_a_usage_error(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"gradient": {"start": "black", "end": "white", "angle": 30}}))
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code != 0


def test_invalid_density_is_a_usage_error(recipe_path):
    result = runner.invoke(app, ["show", str(recipe_path), "--density", "galaxy"])
    assert result.exit_code != 0


def test_outline_with_negative_dash_succeeds(tmp_path):
    path = tmp_path / "negative_dash.json"
    path.write_text(json.dumps({"stroke": {"color": "black", "width": 1}, "dash": {"gap": -2, "width": 3}}))
    output = tmp_path / "outline.json"
    result = runner.invoke(app, ["outline", str(path), "--width", "40", "--height", "20", "-o", str(output)])
    assert result.exit_code == 0, result.output
    assert "dashes" not in json.loads(output.read_text())


def test_bad_palette_override_is_a_usage_error(isolated_config, recipe_path):
    isolated_config.mkdir(parents=True)
    (isolated_config / "shapekit.cfg").write_text(json.dumps({"palette": {"brand": 1.5}}))
    result = runner.invoke(app, ["show", str(recipe_path)])
    assert result.exit_code == 2
