"""Declarative JSON recipes that replay builder calls.

Example recipe::

    {
      "shape": "rectangle",
      "corner": 8,
      "gradient": {"start": "holo_blue_light", "end": "holo_blue_dark", "angle": 90},
      "stroke": {"color_text": "#33000000", "width": 1},
      "dash": {"gap": 2, "width": 4}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from shapekit.builder import ShapeBuilder
from shapekit.colors import parse_color
from shapekit.validation import RecipeError

RECIPE_KEYS = ("shape", "corner", "corners", "solid", "stroke", "dash", "gradient")
_CORNER_KEYS = ("top_left", "top_right", "bottom_left", "bottom_right")
_STROKE_COLOR_KEYS = ("color", "color_text", "color_value")


def _number(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise RecipeError(f"{label} must be a number, got {value!r}.")
    return float(value)


def _section(recipe: Mapping[str, Any], key: str, allowed: tuple[str, ...]) -> Mapping[str, Any]:
    section = recipe[key]
    if not isinstance(section, Mapping):
        raise RecipeError(f"'{key}' must be an object.")
    unknown = sorted(set(section) - set(allowed))
    if unknown:
        raise RecipeError(f"Unknown '{key}' keys: {', '.join(unknown)}.")
    return section


def _apply_stroke(builder: ShapeBuilder, stroke: Mapping[str, Any]) -> ShapeBuilder:
    if "width" not in stroke:
        raise RecipeError("'stroke' requires a width.")
    width = _number(stroke["width"], "stroke.width")
    sources = [key for key in _STROKE_COLOR_KEYS if key in stroke]
    if len(sources) != 1:
        raise RecipeError("'stroke' requires exactly one of color, color_text or color_value.")

    source = sources[0]
    value = stroke[source]
    if source == "color":
        return builder.stroke(value, width)
    if source == "color_text":
        if not isinstance(value, str):
            raise RecipeError("stroke.color_text must be a string.")
        return builder.stroke_text(value, width)
    if isinstance(value, str):
        value = parse_color(value.strip())
    elif isinstance(value, bool) or not isinstance(value, int):
        raise RecipeError("stroke.color_value must be an ARGB int or color string.")
    elif not 0 <= value <= 0xFFFFFFFF:
        raise RecipeError(f"stroke.color_value {value:#x} does not fit in 32 bits.")
    return builder.stroke_int(width, value)


def apply_recipe(recipe: Mapping[str, Any], builder: ShapeBuilder | None = None) -> ShapeBuilder:
    """Replay ``recipe`` on ``builder`` (a fresh builder when omitted)."""

    if not isinstance(recipe, Mapping):
        raise RecipeError("Recipe must be a JSON object.")
    unknown = sorted(set(recipe) - set(RECIPE_KEYS))
    if unknown:
        raise RecipeError(f"Unknown recipe keys: {', '.join(unknown)}.")

    builder = builder if builder is not None else ShapeBuilder()

    if "shape" in recipe:
        builder = builder.shape(recipe["shape"])
    if "corner" in recipe:
        builder = builder.corner(_number(recipe["corner"], "corner"))
    if "corners" in recipe:
        corners = _section(recipe, "corners", _CORNER_KEYS)
        values = [_number(corners.get(key, 0.0), f"corners.{key}") for key in _CORNER_KEYS]
        builder = builder.corners(*values)
    if "solid" in recipe:
        builder = builder.solid(recipe["solid"])
    if "stroke" in recipe:
        stroke = _section(recipe, "stroke", ("width",) + _STROKE_COLOR_KEYS)
        builder = _apply_stroke(builder, stroke)
    if "dash" in recipe:
        dash = _section(recipe, "dash", ("gap", "width"))
        builder = builder.dash(_number(dash.get("gap", 0.0), "dash.gap"), _number(dash.get("width", 0.0), "dash.width"))
    if "gradient" in recipe:
        gradient = _section(recipe, "gradient", ("start", "end", "angle"))
        if "start" not in gradient or "end" not in gradient:
            raise RecipeError("'gradient' requires start and end colors.")
        angle = gradient.get("angle", 0)
        if isinstance(angle, bool) or not isinstance(angle, int):
            raise RecipeError(f"gradient.angle must be an integer, got {angle!r}.")
        builder = builder.gradient(gradient["start"], gradient["end"], angle)
    return builder


def load_recipe(path: Path) -> dict[str, Any]:
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except OSError as exc:
        raise RecipeError(f"Unable to read recipe {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecipeError(f"Recipe {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise RecipeError(f"Recipe {path} must contain a JSON object.")
    return data


__all__ = ["RECIPE_KEYS", "apply_recipe", "load_recipe"]
