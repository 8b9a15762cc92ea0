"""
Reports Package for the Zoo Intake Application.

This package renders the finished animal records of a run.

Modules:
    population_report: Plain-text report grouped by habitat
    excel_report: Workbook export of the same records

Features:
    - Fixed habitat display order (Hyena, Lion, Tiger, Bear)
    - Empty habitats still listed with a zero count
    - Arrival order preserved within each habitat
"""

from __future__ import annotations

from .population_report import PopulationReport, build_population_report
from .excel_report import ExcelPopulationExporter

__all__ = [
    "PopulationReport",
    "build_population_report",
    "ExcelPopulationExporter",
]
