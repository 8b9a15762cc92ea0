"""Use cases for an intake run.

Implements the use case layer: each use case wraps one step of the run and
reports domain errors as a Failure instead of raising them, leaving the
decision to abort to the caller.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from loguru import logger

from core.exceptions import ZooKeeperException
from core.result import Failure, Result, Success
from reports.excel_report import ExcelPopulationExporter
from reports.population_report import PopulationReport
from services.zoo_files import ReportWriter
from zoo.animal import Animal
from zoo.intake import ZooIntake


class ProcessArrivalsUseCase:
    """Turns the arrivals log into Animal records.

    Stops at the first malformed line or unsupported species.
    """

    def __init__(self, intake: ZooIntake):
        self.intake = intake

    def execute(self, lines: Iterable[str]) -> Result[List[Animal], ZooKeeperException]:
        try:
            animals = self.intake.process_lines(lines)
        except ZooKeeperException as e:
            logger.debug(f"Arrival processing stopped: {e}")
            return Failure(e)
        return Success(animals)


class PublishReportUseCase:
    """Renders the population report and writes it, plus the workbook when configured."""

    def __init__(self, report_writer: ReportWriter,
                 excel_exporter: Optional[ExcelPopulationExporter] = None):
        self.report_writer = report_writer
        self.excel_exporter = excel_exporter

    def execute(self, animals: List[Animal]) -> Result[str, ZooKeeperException]:
        """Publish the report.

        Returns:
            Result containing the rendered report text on success
        """
        report = PopulationReport(animals)
        text = report.render()
        try:
            # Cell values are checked before any file is written
            workbook = self.excel_exporter.build(animals) if self.excel_exporter is not None else None
            path = self.report_writer.write(text)
            if workbook is not None:
                self.excel_exporter.save(workbook)
        except ZooKeeperException as e:
            logger.debug(f"Report publishing stopped: {e}")
            return Failure(e)

        summary = ", ".join(f"{habitat}={count}" for habitat, count in report.counts().items())
        logger.info(f"[report] {summary}")
        logger.info(f"Zoo population report written to {path}")
        return Success(text)
