"""CLI interface for tilecalc."""

import json
import logging
from pathlib import Path

import click

from tilecalc import __version__
from tilecalc.engine import compute_uplift_moment, format_result
from tilecalc.schemas import DEFAULT_INPUTS
from tilecalc.settings import get_settings
from tilecalc.validation import ValidationError, validate_input

_LABELS = [
    ("Ma", "Aerodynamic uplift moment, Ma", "ft-lbf"),
    ("qh", "Velocity pressure, qh", "psf"),
    ("Kz", "Exposure coefficient, Kz", ""),
    ("GCp", "Roof pressure coeff., GCp", ""),
    ("Kd", "Directionality factor, Kd", ""),
    ("CL", "Lift coefficient, CL", ""),
    ("b", "Exposed tile width, b", "ft"),
    ("L", "Tile length, L", "ft"),
    ("La", "Moment arm, La", "ft"),
    ("Mf", "Provided resistance, Mf", "ft-lbf"),
]


def _input_options(func):
    """Shared calculation input options, defaulting to the sample tile."""
    options = [
        click.option("--wind-speed", type=str, default=str(DEFAULT_INPUTS["wind_speed_mph"]),
                     show_default=True, help="Ultimate wind speed Vult in mph"),
        click.option("--mean-height", type=str, default=str(DEFAULT_INPUTS["mean_height_ft"]),
                     show_default=True, help="Mean roof height h in feet"),
        click.option("--exposure", type=str, default=DEFAULT_INPUTS["exposure"],
                     show_default=True, help="Exposure category (C or D)"),
        click.option("--roof-zone", type=str, default=str(DEFAULT_INPUTS["roof_zone"]),
                     show_default=True, help="Roof zone: 1 interior, 2 edge, 3 corner"),
        click.option("--tile-length", type=str, default=str(DEFAULT_INPUTS["tile_length_in"]),
                     show_default=True, help="Tile length in inches"),
        click.option("--tile-width", type=str, default=str(DEFAULT_INPUTS["tile_width_in"]),
                     show_default=True, help="Tile width in inches"),
        click.option("--lift-coefficient", type=str,
                     default=str(DEFAULT_INPUTS["lift_coefficient"]),
                     show_default=True, help="Lift coefficient CL"),
        click.option("--resistance", type=str, default=None,
                     help="Provided resistance Mf in ft-lbf (omit to skip the check)"),
        click.option("--advanced", is_flag=True, help="Honour --gcp and --kd overrides"),
        click.option("--gcp", type=str, default=None, help="GCp override (with --advanced)"),
        click.option("--kd", type=str, default=None, help="Kd override (with --advanced)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _compute(params: dict):
    raw = {
        "wind_speed_mph": params["wind_speed"],
        "mean_height_ft": params["mean_height"],
        "exposure": params["exposure"],
        "roof_zone": params["roof_zone"],
        "tile_length_in": params["tile_length"],
        "tile_width_in": params["tile_width"],
        "lift_coefficient": params["lift_coefficient"],
        "provided_resistance_mf": params["resistance"],
        "gcp_override": params["gcp"],
        "kd_override": params["kd"],
    }
    try:
        data = validate_input(raw, advanced=params["advanced"])
        return data, compute_uplift_moment(data, advanced=True)
    except ValidationError as e:
        raise click.UsageError(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", type=str, default=None, help="Override TILECALC_LOG_LEVEL")
def main(log_level: str | None):
    """Tilecalc - wind uplift moment calculator for rigid roof tiles."""
    level = (log_level or get_settings().log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@main.command()
@_input_options
@click.option("--json", "as_json", is_flag=True, help="Print the full-precision JSON record")
@click.option("--output", type=click.Path(), help="Output JSON file path")
def calculate(as_json: bool, output: str | None, **params):
    """Calculate the uplift moment for a rigid roof tile."""
    _, result = _compute(params)
    record = result.to_record()

    if output:
        Path(output).write_text(json.dumps(record, indent=2))
        click.echo(f"Results saved to {output}")
        return

    if as_json:
        click.echo(json.dumps(record, indent=2))
        return

    rounded = format_result(result, get_settings().display_decimals)
    if "result" in rounded:
        click.echo(f"Result: {rounded['result']}")
    for key, label, unit in _LABELS:
        if key in rounded:
            click.echo(f"{label:<32} {rounded[key]} {unit}".rstrip())


@main.command()
@_input_options
@click.option("--output", type=click.Path(), help="Output PDF file path")
def report(output: str | None, **params):
    """Generate a PDF report for a tile uplift calculation."""
    from tilecalc.report import draw_pdf

    data, result = _compute(params)
    settings = get_settings()
    if output:
        output_path = Path(output)
    else:
        settings.report_dir.mkdir(parents=True, exist_ok=True)
        output_path = settings.report_dir / "tile_uplift_report.pdf"

    draw_pdf(output_path, data, result, decimals=settings.display_decimals)
    click.echo(f"Report generated: {output_path}")


@main.command()
@click.argument("input_file", type=click.Path(exists=True))
@click.option("--output", type=click.Path(), required=True,
              help="Output file path (.csv or .xlsx)")
@click.option("--advanced", is_flag=True, help="Honour gcp/kd override columns")
def batch(input_file: str, output: str, advanced: bool):
    """Calculate every row of a CSV of tile inputs."""
    import pandas as pd

    from tilecalc.tables import create_summary_table, export_to_csv, export_to_excel, run_batch

    results = run_batch(pd.read_csv(input_file), advanced=advanced)
    if output.lower().endswith(".xlsx"):
        export_to_excel(results, output)
    else:
        export_to_csv(results, output)

    summary = create_summary_table(results)
    for metric, value in zip(summary.get("metric", []), summary.get("value", [])):
        click.echo(f"{metric}: {value}")
    click.echo(f"Results saved to {output}")


@main.command()
def serve():
    """Start the FastAPI server (JSON API)."""
    import uvicorn

    settings = get_settings()
    click.echo(f"Starting Tilecalc server on http://{settings.host}:{settings.port}")
    uvicorn.run("tilecalc.application:app", host=settings.host, port=settings.port, reload=True)


if __name__ == "__main__":
    main()
