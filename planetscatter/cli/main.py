from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import trimesh
import typer
import yaml

from ..config import default_config, load_config
from ..config.schema import PlanetSettings
from ..mesh.bend import bend_mesh, bend_scene
from ..mesh.planet import generate_planet_mesh, write_ascii_ply
from ..sdk.run import scatter_from_config

app = typer.Typer(help="Planet decoration scattering utilities")
mesh_app = typer.Typer(help="Planet and asset mesh helpers")
app.add_typer(mesh_app, name="mesh")


def _configure_logging(level: str) -> None:
    numeric = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric, format="[%(levelname)s] %(message)s")
    logging.getLogger("planetscatter").setLevel(numeric)


def _execute_scatter(config: Path, output_override: Optional[Path], log_level: str) -> None:
    _configure_logging(log_level)
    if output_override is not None:
        ext = output_override.suffix.lower()
        if ext not in {".json", ".npz", ".ply"}:
            raise typer.BadParameter(f"Unsupported output extension '{ext}'", param_hint="--output")
    result = scatter_from_config(config, output=output_override)
    layers = len(result.config.layers)
    typer.echo(f"Placed {result.stats['total']} instances in {layers} layers → {result.output_path}")


@app.command("scatter")
def scatter(
    config: Path = typer.Argument(..., exists=True, readable=True, help="Path to YAML configuration file."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Override output path (extension sets format)."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Scatter every layer of a planet described by a YAML config."""

    _execute_scatter(config, output, log_level)


@app.command("run")
def run(
    config: Path = typer.Argument(..., exists=True, readable=True, help="Path to YAML configuration file."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Override output path (extension sets format)."),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level (e.g. INFO, DEBUG)."),
) -> None:
    """Alias for `scatter`"""

    _execute_scatter(config, output, log_level)


@app.command("init")
def init(
    output: Path = typer.Argument(Path("planet.yaml"), help="Where to write the default configuration."),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write the demo planet configuration as YAML."""

    out = output.resolve()
    if out.exists() and not force:
        raise typer.BadParameter(f"{out} already exists (use --force)", param_hint="OUTPUT")
    out.parent.mkdir(parents=True, exist_ok=True)
    data = default_config().model_dump(mode="json")
    with open(out, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)
    typer.echo(f"Wrote default configuration to {out}")


@mesh_app.command("planet")
def mesh_planet(
    output: Path = typer.Argument(..., help="Output mesh path (.ply)."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", exists=True, readable=True, help="Take radius and segments from a planet config."
    ),
    radius: Optional[float] = typer.Option(None, "--radius", help="Sphere radius (overrides --config)."),
    segments: Optional[int] = typer.Option(None, "--segments", help="Width and height segments (overrides --config)."),
) -> None:
    """Generate the planet sphere mesh."""

    planet = load_config(config).planet if config is not None else PlanetSettings()
    radius = planet.radius if radius is None else radius
    segments = planet.segments if segments is None else segments
    if radius <= 0.0:
        raise typer.BadParameter("radius must be positive.", param_hint="--radius")
    if segments < 3:
        raise typer.BadParameter("segments must be at least 3.", param_hint="--segments")
    out = output.resolve()
    vertices, faces, colors, normals = generate_planet_mesh(radius, segments, segments)
    write_ascii_ply(out, vertices, faces, colors, normals)
    typer.echo(f"Wrote planet mesh ({len(vertices)} vertices) to {out}")


@mesh_app.command("bend")
def mesh_bend(
    source: Path = typer.Argument(..., exists=True, readable=True, help="Input mesh (any format trimesh reads)."),
    output: Path = typer.Argument(..., help="Output mesh path; format from extension."),
    strength: float = typer.Option(0.003, "--strength", help="Parabolic sag per squared unit of distance."),
) -> None:
    """Bend a flat asset (e.g. a pond) so it sits on a curved surface."""

    loaded = trimesh.load(str(source))
    if isinstance(loaded, trimesh.Scene):
        bent = bend_scene(loaded, strength)
    else:
        bent = bend_mesh(loaded, strength)
    out = output.resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    bent.export(str(out))
    typer.echo(f"Wrote bent mesh to {out}")


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
