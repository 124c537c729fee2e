"""Projection Report Generator - Excel export of a projection run.

Produces a workbook with the headline KPIs, the yearly phase timeline and
the period-by-period cash flow, grouped by development phase.
"""

import io
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils.dataframe import dataframe_to_rows

from ..calculations.projection import ProjectionResult
from ..models.lookups import TAX_REGIMES, TaxRegime

NOT_REACHED = "not reached"


@dataclass
class ReportConfig:
    """Configuration for projection report generation."""
    include_summary: bool = True
    include_timeline: bool = True
    include_cash_flows: bool = True
    project_name: str = "Glamping Development"
    scenario_name: str = "Base Case"
    tax_regime: Optional[TaxRegime] = None


def _format_payback(payback: Optional[float]) -> str:
    if payback is None:
        return NOT_REACHED
    return f"{payback:.1f} years"


def _add_header_style(ws, row: int, cols: int) -> None:
    """Apply header styling to a row."""
    header_fill = PatternFill(start_color="1F4E79", end_color="1F4E79", fill_type="solid")
    header_font = Font(color="FFFFFF", bold=True)

    for col in range(1, cols + 1):
        cell = ws.cell(row=row, column=col)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center")


def _add_section_header(ws, title: str, row: int) -> int:
    """Add a section header and return next row."""
    ws.cell(row=row, column=1, value=title)
    ws.cell(row=row, column=1).font = Font(bold=True, size=14)
    return row + 1


def generate_projection_excel(
    result: ProjectionResult,
    config: Optional[ReportConfig] = None,
) -> bytes:
    """Generate an Excel report of a projection.

    Args:
        result: The ProjectionResult from run_projection()
        config: Optional configuration for the report

    Returns:
        Excel file as bytes
    """
    if config is None:
        config = ReportConfig(scenario_name=result.scenario_name)

    wb = Workbook()
    wb.remove(wb.active)

    if config.include_summary:
        ws = wb.create_sheet("Summary")
        _create_summary_sheet(ws, result, config)

    if config.include_timeline:
        ws = wb.create_sheet("Timeline")
        _create_timeline_sheet(ws, result)

    if config.include_cash_flows:
        ws = wb.create_sheet("Cash Flows")
        _create_cash_flows_sheet(ws, result)

    # Workbook needs at least one sheet
    if not wb.sheetnames:
        wb.create_sheet("Summary")

    output = io.BytesIO()
    wb.save(output)
    output.seek(0)
    return output.getvalue()


def _create_summary_sheet(ws, result: ProjectionResult, config: ReportConfig) -> None:
    """Create the summary sheet."""
    kpis = result.kpis
    row = 1

    ws.cell(row=row, column=1, value=f"Projection Report: {config.project_name}")
    ws.cell(row=row, column=1).font = Font(bold=True, size=16)
    row += 1

    ws.cell(row=row, column=1, value=f"Scenario: {config.scenario_name}")
    row += 1
    if config.tax_regime is not None:
        ws.cell(row=row, column=1, value=f"Tax regime: {TAX_REGIMES[config.tax_regime].name}")
        row += 1

    ws.cell(row=row, column=1, value=f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    row += 2

    row = _add_section_header(ws, "Key Metrics (millions)", row)
    row += 1

    periodic_irr = (
        f"{result.periodic_irr:.2%}" if result.periodic_irr is not None else "-"
    )
    metrics = [
        ("Total CAPEX", round(result.total_capex, 2)),
        ("Total Investment", round(kpis.total_investment, 2)),
        ("", ""),
        ("Payback Period", _format_payback(kpis.payback_period)),
        ("IRR (simplified)", f"{kpis.irr:.2%}"),
        ("IRR (period cash flows)", periodic_irr),
        ("NPV @ 15%", round(kpis.npv, 2)),
        ("Final Cumulative CF", round(kpis.final_cumulative_cf, 2)),
        ("", ""),
        ("Revenue 2029", round(result.annual_revenue(2029), 2)),
    ]

    for label, value in metrics:
        if label:
            ws.cell(row=row, column=1, value=label)
            ws.cell(row=row, column=2, value=value)
        row += 1

    ws.column_dimensions['A'].width = 28
    ws.column_dimensions['B'].width = 20


def _create_timeline_sheet(ws, result: ProjectionResult) -> None:
    """Create the yearly timeline sheet."""
    row = 1
    row = _add_section_header(ws, "Development Timeline", row)
    row += 1

    headers = ["Year", "Phase", "Units", "CAPEX"]
    for col, header in enumerate(headers, 1):
        ws.cell(row=row, column=col, value=header)
    _add_header_style(ws, row, len(headers))
    row += 1

    for entry in result.timeline:
        ws.cell(row=row, column=1, value=entry.year)
        ws.cell(row=row, column=2, value=entry.name)
        ws.cell(row=row, column=3, value=entry.units)
        ws.cell(row=row, column=4, value=round(entry.capex, 2))
        row += 1

    ws.column_dimensions['A'].width = 10
    ws.column_dimensions['B'].width = 22
    ws.column_dimensions['C'].width = 10
    ws.column_dimensions['D'].width = 12


def _create_cash_flows_sheet(ws, result: ProjectionResult) -> None:
    """Create the Cash Flows sheet with a separator row per phase."""
    row = 1
    row = _add_section_header(ws, "Period-by-Period Cash Flows (millions)", row)
    row += 1

    df = result.to_dataframe()
    columns = ["period", "revenue", "opex", "capex", "tax", "net_cf", "cumulative_cf"]
    headers = ["Period", "Revenue", "OPEX", "CAPEX", "Tax", "Net CF", "Cumulative CF"]

    for col, header in enumerate(headers, 1):
        ws.cell(row=row, column=col, value=header)
    _add_header_style(ws, row, len(headers))
    row += 1

    current_phase = None
    for phase, values in zip(df["phase"], dataframe_to_rows(df[columns].round(2), index=False, header=False)):
        if phase != current_phase:
            ws.cell(row=row, column=1, value=phase)
            ws.cell(row=row, column=1).font = Font(bold=True)
            current_phase = phase
            row += 1
        for col, value in enumerate(values, 1):
            ws.cell(row=row, column=col, value=value)
        row += 1

    for col in range(1, len(headers) + 1):
        ws.column_dimensions[chr(64 + col)].width = 15
