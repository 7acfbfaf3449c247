import logging
import sys
from loguru import logger
from typing import Any, Optional
import json

from config import settings


HUMAN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Intercept standard logging messages and route them to loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def serialize_record(record: dict[str, Any]) -> str:
    """Serialize log record to JSON and return a loguru format template for it"""
    subset = {
        "timestamp": record["time"].timestamp(),
        "message": record["message"],
        "level": record["level"].name,
        "module": record["module"],
        "function": record["function"],
        "line": record["line"],
    }

    if record["exception"] is not None:
        subset["exception"] = {
            "type": record["exception"].type.__name__,
            "value": str(record["exception"].value),
        }

    subset.update(
        {k: v for k, v in record["extra"].items() if k != "serialized"}
    )
    record["extra"]["serialized"] = json.dumps(subset, default=str)

    return "{extra[serialized]}\n"


def setup_logging(log_level: Optional[str] = None) -> Any:
    """Configure logging for the application"""
    log_level = (log_level or settings.log_level).upper()
    development = settings.app_env == "development"

    # Remove default logger
    logger.remove()

    if development:
        logger.add(sys.stderr, format=HUMAN_FORMAT, level=log_level, colorize=True)
    else:
        # JSON lines for anything that is not a developer terminal
        logger.add(sys.stderr, format=serialize_record, level=log_level)

    if settings.log_to_file:
        logger.add(
            f"{settings.log_dir}/{settings.app_name}_{{time}}.log",
            rotation="1 day",
            retention="7 days",
            level=log_level,
            format=HUMAN_FORMAT if development else serialize_record,
        )

    # Intercept standard logging
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    return logger
