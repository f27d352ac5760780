"""
Structured logging for the pattern catalogue.

Every log line can carry the pattern, category, session and demo step it
belongs to. Console output is human readable by default; the optional log
file is always JSON lines.
"""

# pylint: disable=too-many-arguments, too-many-positional-arguments

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

ROOT_LOGGER_NAME = "catalogue"

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Record attribute -> label used by the human readable formatter
CONTEXT_FIELDS = (
    ("pattern", "pattern"),
    ("category", "category"),
    ("session_id", "session"),
    ("step", "step"),
    ("duration_ms", "duration"),
)


def _context(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the catalogue context attached to a record."""
    found: Dict[str, Any] = {}
    for attr, _ in CONTEXT_FIELDS:
        value = getattr(record, attr, None)
        if value is not None and value != "":
            found[attr] = value
    return found


class StructuredFormatter(logging.Formatter):
    """Formats records as one JSON object per line."""

    def __init__(self, include_timestamp: bool = True) -> None:
        super().__init__()
        self._include_timestamp = include_timestamp

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }
        if self._include_timestamp:
            log_data["timestamp"] = datetime.now().isoformat()

        log_data.update(_context(record))
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            log_data["data"] = extra_data

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Formats records as ``time | LEVEL | [context] message``."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self._use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        context = _context(record)
        if "session_id" in context:
            context["session_id"] = str(context["session_id"])[:8]
        if "duration_ms" in context:
            context["duration_ms"] = f"{context['duration_ms']}ms"

        labels = dict(CONTEXT_FIELDS)
        parts: List[str] = [f"{labels[key]}={value}" for key, value in context.items()]
        context_str = f" [{', '.join(parts)}]" if parts else ""

        level = f"{record.levelname:8}"
        if self._use_colors:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"{timestamp} | {level} |{context_str} {record.getMessage()}"
        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"
        return line


class CatalogueLogger:
    """Logger that stamps catalogue context on every record.

    Usage:
        logger = CatalogueLogger("runner", session_id="abc123")
        logger.info("Running demo", pattern="builder", extra={"verbose": True})
    """

    def __init__(
        self,
        name: str,
        session_id: Optional[str] = None,
        pattern: Optional[str] = None,
        category: Optional[str] = None,
    ) -> None:
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
        self._session_id = session_id
        self._pattern = pattern
        self._category = category

    @property
    def name(self) -> str:
        """Full name of the underlying stdlib logger."""
        return self._logger.name

    def _log(
        self,
        level: int,
        message: str,
        pattern: Optional[str] = None,
        category: Optional[str] = None,
        step: Optional[int] = None,
        duration_ms: Optional[float] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: bool = False,
    ) -> None:
        """Log with the bound context; call arguments win over bound ones."""
        context = {
            "pattern": pattern or self._pattern,
            "category": category or self._category,
            "session_id": self._session_id,
            "step": step,
            "duration_ms": None if duration_ms is None else round(duration_ms, 2),
            "extra_data": extra or None,
        }
        log_extra = {key: value for key, value in context.items() if value is not None}
        self._logger.log(level, message, extra=log_extra, exc_info=exc_info)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    json_format: bool = False,
    use_colors: bool = True,
) -> None:
    """Configure the "catalogue" logger hierarchy.

    Args:
        level: Minimum level name, case insensitive
        log_file: Optional file receiving JSON lines
        json_format: Use JSON on the console instead of readable text
        use_colors: Colour the level in readable console output

    Raises:
        ValueError: If the level name is unknown
    """
    level_name = str(level).upper()
    if level_name not in LEVELS:
        raise ValueError(f"Unknown log level '{level}'; expected one of {', '.join(LEVELS)}")

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level_name)
    root_logger.handlers.clear()

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = HumanReadableFormatter(use_colors=use_colors)

    # stderr keeps demo output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_path = Path(log_file)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)


def get_logger(
    name: str,
    session_id: Optional[str] = None,
    pattern: Optional[str] = None,
    category: Optional[str] = None,
) -> CatalogueLogger:
    """Get a catalogue logger named ``catalogue.<name>``."""
    return CatalogueLogger(
        name=name, session_id=session_id, pattern=pattern, category=category
    )
