"""CLI entry point for the navigation compass tools."""

from pathlib import Path
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from . import __version__

app = typer.Typer(
    name="hksr-compass",
    help="Navigation compass tools - load, validate and normalize three-ring compass states",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hksr-compass {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Navigation compass tools."""


def _load_spec(spec_file: Path):
    from .models import load_compass_spec

    if not spec_file.exists():
        typer.echo(f"Error: Compass file not found: {spec_file}", err=True)
        raise typer.Exit(1)

    try:
        return load_compass_spec(spec_file)
    except ValidationError as e:
        typer.echo(f"Error: Invalid compass file {spec_file}:\n{e}", err=True)
        raise typer.Exit(1)
    except yaml.YAMLError as e:
        typer.echo(f"Error: Malformed YAML in {spec_file}: {e}", err=True)
        raise typer.Exit(1)
    except OSError as e:
        typer.echo(f"Error: Cannot read compass file {spec_file}: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def show(
    spec_file: Path = typer.Argument(..., help="Path to YAML compass description"),
    validate: bool = typer.Option(
        True, "--validate/--no-validate", help="Validate the compass before printing"
    ),
) -> None:
    """Print the compass notation of a compass description."""
    from .models import CompassValidationError

    spec = _load_spec(spec_file)
    compass = spec.to_compass()

    if validate:
        try:
            compass.validate()
        except CompassValidationError as e:
            typer.echo(f"Validation error: {e}", err=True)
            raise typer.Exit(1)

    typer.echo(str(compass))


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Path to YAML compass description"),
) -> None:
    """Validate a compass description without printing its notation."""
    from .models import CompassValidationError

    typer.echo(f"Validating compass from {spec_file}...")
    spec = _load_spec(spec_file)
    compass = spec.to_compass()

    try:
        compass.validate()
    except CompassValidationError as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)

    std = compass.standardize()
    typer.echo(f"Compass valid: {spec.name or spec_file.stem}")
    for label, ring in zip(("Outer", "Middle", "Inner"), std.rings):
        typer.echo(f"  {label + ':':<8} location={ring.location} speed={ring.speed:+d}")
    typer.echo(f"  Groups: {', '.join(str(rg) for rg in std.ring_groups)}")


@app.command()
def normalize(
    notation: str = typer.Argument(..., help="Compass notation, e.g. 7-7,3+2,5+0/i,o,i"),
) -> None:
    """Print the standardized form of a compass notation string."""
    from .notation import NotationError, parse_notation

    try:
        compass = parse_notation(notation)
    except NotationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(str(compass))


@app.command()
def list_groups() -> None:
    """List the ring groups that can be rotated together."""
    from .models import RingGroup

    typer.echo("Ring groups:\n")
    for rg in RingGroup.named():
        typer.echo(f"  {rg.short_name:<4} {rg.long_name:<12} {int(rg):03b}")


if __name__ == "__main__":
    app()
