import json
import logging
import os
from datetime import datetime
from typing import Any, Optional

from loguru import logger as loguru_logger


class RunLogger:
    """Per-run log file for an intake run.

    Writes start/end markers and the active configuration, and mirrors
    loguru output into the same file while the run is open.
    """

    def __init__(self, log_dir: str = "logs/sessions", auto_start: bool = True):
        """Initialize run logger.

        Args:
            log_dir: Directory for run logs
            auto_start: Whether to write the start marker immediately
        """
        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # minute_hour_day_month_year
        timestamp = datetime.now().strftime("%M_%H_%d_%m_%Y")
        self.log_path = os.path.join(self.log_dir, f"zoo_run_{timestamp}.log")

        self._py_logger = logging.getLogger(f"ZooRunLogger_{timestamp}")
        self._py_logger.setLevel(logging.INFO)
        self._py_logger.propagate = False
        self._file_handler = logging.FileHandler(self.log_path, encoding="utf-8")
        self._file_handler.setFormatter(
            logging.Formatter('[%(asctime)s] %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
        )
        self._py_logger.handlers = [self._file_handler]

        self._sink_id: Optional[int] = None
        self._ended: bool = False
        self.attach_loguru_sink()

        if auto_start:
            self.log("=== RUN START ===")

    def attach_loguru_sink(self) -> None:
        """Mirror loguru records into the run log file."""
        if self._sink_id is None:
            self._sink_id = loguru_logger.add(
                self.log_path,
                format="[{time:YYYY-MM-DD HH:mm:ss}] {level}: {message}",
                level="INFO",
            )

    def detach_loguru_sink(self) -> None:
        if self._sink_id is not None:
            loguru_logger.remove(self._sink_id)
            self._sink_id = None

    def log(self, message: str) -> None:
        self._py_logger.info(message)

    def log_kv(self, key: str, value: Any) -> None:
        """Log a key-value pair, dumping dicts and lists as JSON."""
        if isinstance(value, (dict, list)):
            value_str = json.dumps(value, indent=2, default=str)
        else:
            value_str = str(value)
        self.log(f"{key}: {value_str}")

    def log_end(self, exit_code: Optional[int] = None) -> None:
        """Write the end marker and release the file (idempotent)."""
        if self._ended:
            return
        self._ended = True
        suffix = f" (exit code {exit_code})" if exit_code is not None else ""
        self.log(f"=== RUN END{suffix} ===")
        self.detach_loguru_sink()
        self._py_logger.removeHandler(self._file_handler)
        self._file_handler.close()
