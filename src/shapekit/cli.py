from __future__ import annotations

import json
import pathlib

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from shapekit._config import get_density_settings, parse_density
from shapekit.builder import ShapeBuilder
from shapekit.descriptor import ShapeDescriptor
from shapekit.io.android_xml import write_android_xml
from shapekit.outline import outline as compute_outline
from shapekit.recipe import apply_recipe, load_recipe
from shapekit.validation import ShapeError

console = Console()
app = typer.Typer(help="Build shape descriptors from recipes and hand them to rendering backends.")


def _resolve_density(density: str | None) -> float:
    if density is None:
        settings = get_density_settings()
    else:
        settings = parse_density(density)
        if settings is None:
            raise typer.BadParameter(f"Invalid density {density!r}.")
    console.print(f"[magenta]Density: {settings.name} ({settings.density:g}x).[/magenta]")
    return settings.density


def _build_descriptor(recipe_path: pathlib.Path, density: str | None) -> ShapeDescriptor:
    if not recipe_path.exists():
        raise typer.BadParameter(f"Recipe path {recipe_path} does not exist.")
    scale = _resolve_density(density)
    try:
        recipe = load_recipe(recipe_path)
        builder = apply_recipe(recipe, ShapeBuilder(density=scale))
        return builder.build()
    except ShapeError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _next_available_path(path: pathlib.Path) -> pathlib.Path:
    """Return a non-conflicting path by appending ' (n)' before the suffix."""

    if not path.exists():
        return path

    parent = path.parent
    stem = path.stem
    suffix = path.suffix
    n = 1
    while True:
        candidate = parent / f"{stem} ({n}){suffix}"
        if not candidate.exists():
            return candidate
        n += 1


def _density_option() -> str | None:
    return typer.Option(None, "--density", help="Override the configured density (e.g. xhdpi, 320dpi, 2.0).")


@app.command()
def show(
    recipe: pathlib.Path = typer.Argument(..., help="Path to a JSON shape recipe."),
    density: str | None = _density_option(),
) -> None:
    """
    Build the recipe and print the resulting descriptor.
    """

    descriptor = _build_descriptor(recipe, density)
    table = Table(title=str(recipe), show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")
    for key, value in descriptor.summary().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def export(
    recipe: pathlib.Path = typer.Argument(..., help="Recipe to export."),
    output: pathlib.Path = typer.Option(
        pathlib.Path("shape.xml"),
        "--output",
        "-o",
        help="Path to the Android drawable XML that will be produced.",
    ),
    overwrite: bool = typer.Option(False, "--overwrite", help="Allow replacing an existing file."),
    density: str | None = _density_option(),
) -> None:
    """
    Build the recipe and save it as an Android <shape> drawable.
    """

    descriptor = _build_descriptor(recipe, density)

    final_output = output
    if output.exists() and not overwrite:
        final_output = _next_available_path(output)
        console.print(f"[yellow]Output {output} exists; writing to {final_output} instead.[/yellow]")

    final_output.parent.mkdir(parents=True, exist_ok=True)
    try:
        write_android_xml(descriptor, final_output)
    except OSError as exc:
        raise typer.BadParameter(f"Failed to write drawable: {exc}") from exc

    console.print(
        Panel(
            f"Wrote {descriptor.kind.name.lower()} drawable to [green]{final_output}[/green].",
            title="Export complete",
            border_style="green",
        )
    )


@app.command()
def outline(
    recipe: pathlib.Path = typer.Argument(..., help="Recipe to outline."),
    width: float = typer.Option(..., "--width", min=0.0, help="Bounding box width in device units."),
    height: float = typer.Option(..., "--height", min=0.0, help="Bounding box height in device units."),
    segments: int = typer.Option(64, "--segments", min=3, help="Segments per full circle when sampling arcs."),
    output: pathlib.Path | None = typer.Option(None, "--output", "-o", help="Write the outline JSON here."),
    density: str | None = _density_option(),
) -> None:
    """
    Sample the outline paths of the recipe's shape as JSON points.
    """

    descriptor = _build_descriptor(recipe, density)
    try:
        shape_outline = compute_outline(descriptor, (width, height), segments_per_circle=segments)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    payload = json.dumps(shape_outline.to_dict(segments_per_circle=segments), indent=2)
    if output is None:
        console.print_json(payload)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload + "\n")
    console.print(f"Wrote outline to [green]{output}[/green].")


if __name__ == "__main__":
    app()
