"""PDF report generation module."""

from __future__ import annotations

from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from tilecalc.asce7 import ASCE7_EDITION
from tilecalc.engine import DISCLAIMER
from tilecalc.schemas import CalculationInput, CalculationResult, Verdict


def draw_pdf(
    output_path: Path,
    input_data: CalculationInput | None,
    result: CalculationResult,
    decimals: int = 2,
) -> None:
    """Generate a PDF report for a tile uplift calculation."""

    doc = SimpleDocTemplate(str(output_path), pagesize=letter)
    styles = getSampleStyleSheet()
    story = []

    title = Paragraph("Rigid Tile Uplift Moment Report", styles["Title"])
    story.append(title)
    story.append(Spacer(1, 0.25 * inch))

    if input_data:
        story.extend(_input_section(input_data, styles))

    if result.check is not None:
        story.extend(_verdict_section(result, styles, decimals))

    story.extend(_breakdown_section(result, styles, decimals))

    story.append(Paragraph(f"<b>Disclaimer:</b> {DISCLAIMER}", styles["Normal"]))

    doc.build(story)


def _input_section(data: CalculationInput, styles: dict[str, ParagraphStyle]):
    story = []
    story.append(Paragraph("<b>Inputs</b>", styles["Heading2"]))

    rows = [
        ["Wind speed, Vult", f"{data.wind_speed_mph} mph"],
        ["Mean roof height, h", f"{data.mean_height_ft} ft"],
        ["Exposure", data.exposure.value],
        ["Roof zone", f"{int(data.roof_zone)} ({data.roof_zone.name.lower()})"],
        ["Tile length", f"{data.tile_length_in} in"],
        ["Tile width", f"{data.tile_width_in} in"],
        ["Lift coefficient, CL", f"{data.lift_coefficient}"],
    ]
    if data.gcp_override is not None:
        rows.append(["GCp override", f"{data.gcp_override}"])
    if data.kd_override is not None:
        rows.append(["Kd override", f"{data.kd_override}"])

    table = Table(rows)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), colors.lightgrey),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ]
        )
    )
    story.append(table)
    story.append(Spacer(1, 0.2 * inch))
    return story


def _breakdown_section(
    result: CalculationResult,
    styles: dict[str, ParagraphStyle],
    decimals: int,
):
    story = []
    story.append(Paragraph("<b>Calculation Breakdown</b>", styles["Heading2"]))

    def fmt(value: float) -> str:
        return f"{value:.{decimals}f}"

    rows = [
        ["Aerodynamic uplift moment, Ma", f"{fmt(result.Ma)} ft-lbf", "FBC 1609.6.3"],
        ["Velocity pressure, qh", f"{fmt(result.qh)} psf", f"{ASCE7_EDITION} Eq. 26.10-1"],
        ["Exposure coefficient, Kz", fmt(result.Kz), f"{ASCE7_EDITION} Table 26.10-1"],
        ["Roof pressure coeff., GCp", fmt(result.GCp), f"{ASCE7_EDITION} Ch. 30"],
        ["Directionality factor, Kd", fmt(result.Kd), f"{ASCE7_EDITION} Table 26.6-1"],
        ["Lift coefficient, CL", fmt(result.CL), "FBC 2023"],
        ["Exposed tile width, b", f"{fmt(result.b)} ft", ""],
        ["Tile length, L", f"{fmt(result.L)} ft", ""],
        ["Moment arm, La", f"{fmt(result.La)} ft", "0.76 L"],
    ]
    if result.check is not None:
        rows.append(["Provided resistance, Mf", f"{fmt(result.check.Mf)} ft-lbf", "NOA"])

    table = Table(rows)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), colors.beige),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ]
        )
    )
    story.append(table)
    story.append(Spacer(1, 0.2 * inch))
    return story


def _verdict_section(
    result: CalculationResult,
    styles: dict[str, ParagraphStyle],
    decimals: int,
):
    """Pass/Fail banner, only drawn when a resistance was supplied."""
    story = []
    check = result.check

    if check.result is Verdict.PASS:
        bg_color = colors.lightgreen
        text_color = colors.darkgreen
        footer = "Provided resistance meets or exceeds the uplift moment."
    else:
        bg_color = colors.pink
        text_color = colors.darkred
        footer = "Provided resistance is less than the uplift moment."

    status_style = ParagraphStyle(
        "StatusHeader",
        parent=styles["Normal"],
        fontSize=14,
        textColor=text_color,
        backColor=bg_color,
        borderPadding=10,
        borderWidth=2,
        borderColor=text_color,
    )
    story.append(Paragraph(check.result.value.upper(), status_style))
    story.append(Spacer(1, 0.15 * inch))
    story.append(
        Paragraph(
            f"{footer} Mf = {check.Mf:.{decimals}f} ft-lbf, "
            f"Ma = {result.Ma:.{decimals}f} ft-lbf.",
            styles["Normal"],
        )
    )
    story.append(Spacer(1, 0.2 * inch))
    return story


__all__ = ["draw_pdf"]
