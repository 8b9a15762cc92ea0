"""Application startup.

Main entry point that wires configuration, logging, file services and the
use cases into one intake run, and maps failures to the exit status.
"""
from __future__ import annotations

import sys
from typing import List, Optional

from loguru import logger

from app.use_cases import ProcessArrivalsUseCase, PublishReportUseCase
from config.service import ConfigurationService, ConfigurationServiceFactory
from core.error_handler import ErrorHandler
from core.exceptions import ResourceError, ZooKeeperException
from logger.session_logger import RunLogger
from reports.excel_report import ExcelPopulationExporter
from services.zoo_files import ReportWriter, load_name_pool, read_arrival_lines
from zoo.intake import ZooIntake

EXIT_OK = 0
EXIT_FAILURE = 1


def configure_logging(level: str) -> None:
    """Replace loguru's default sink with a stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss} | {level: <8} | {message}")


def run_application(argv: Optional[List[str]] = None) -> int:
    """Run one intake: read inputs, build animals, publish the report.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit status: 0 on success, 1 on the first failure
    """
    error_handler = ErrorHandler()
    args = sys.argv[1:] if argv is None else argv

    try:
        config_service, unknown_args = ConfigurationServiceFactory.create_from_args(args)
    except ZooKeeperException as e:
        error_handler.handle(e, context="Fatal error")
        return EXIT_FAILURE

    configure_logging(config_service.log_level)
    if unknown_args:
        logger.warning(f"Ignoring unknown arguments: {' '.join(unknown_args)}")

    exit_code = EXIT_FAILURE
    run_logger = None
    try:
        if config_service.session_log_enabled:
            run_logger = _open_run_logger(config_service)
        _run(config_service)
        exit_code = EXIT_OK
    except ZooKeeperException as e:
        error_handler.handle(e, context="Fatal error")
    finally:
        if run_logger is not None:
            run_logger.log_end(exit_code)
    return exit_code


def _open_run_logger(config_service: ConfigurationService) -> RunLogger:
    """Start the per-run log file and record the configuration.

    Raises:
        ResourceError: If the log directory or file cannot be created
    """
    try:
        run_logger = RunLogger(config_service.session_log_dir)
    except OSError as e:
        raise ResourceError(f"Unable to open run log in {config_service.session_log_dir}: {e}") from e
    run_logger.log_kv("Configuration", config_service.to_dict())
    return run_logger


def _run(config_service: ConfigurationService) -> None:
    """Execute the run, raising the first ZooKeeperException encountered."""
    names = load_name_pool(config_service.names_path)
    lines = read_arrival_lines(config_service.arrivals_path)

    intake = ZooIntake(names)
    animals = ProcessArrivalsUseCase(intake).execute(lines).unwrap()
    logger.debug(f"Intake stats: {intake.get_stats()}")

    excel_exporter = (
        ExcelPopulationExporter(config_service.excel_path) if config_service.excel_enabled else None
    )
    PublishReportUseCase(ReportWriter(config_service.report_path), excel_exporter).execute(animals).unwrap()
