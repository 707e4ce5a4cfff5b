"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO
from pythonjsonlogger import jsonlogger

from rental_store.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: TextIO = sys.stdout) -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler (stdout unless told otherwise)
    handler = logging.StreamHandler(stream)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_statement(
    request_id: str,
    customer_name: str,
    format_name: str,
    rental_count: int,
    duration_ms: float,
) -> None:
    """Log structured statement outcome for analysis"""
    logging.info(
        "Statement rendered",
        extra={
            "request_id": request_id,
            "customer_name": customer_name,
            "step": "statement_complete",
            "statement_format": format_name,
            "rental_count": rental_count,
            "duration_ms": duration_ms,
        },
    )
