"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger

from inbank_gateway.config import settings
from inbank_gateway.domain.models import Decision


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def mask_personal_code(personal_code: str) -> str:
    """Hide all but the last four digits of a personal ID code"""
    if len(personal_code) <= 4:
        return "*" * len(personal_code)
    return "*" * (len(personal_code) - 4) + personal_code[-4:]


def log_decision(
    request_id: str,
    personal_code: str,
    decision: Decision,
    duration_ms: float,
    requested_period: Optional[int] = None,
) -> None:
    """Log structured decision outcome for analysis"""
    logging.info(
        "Decision completed",
        extra={
            "request_id": request_id,
            "personal_code": mask_personal_code(personal_code),
            "step": "decision_complete",
            "approval_outcome": "approved" if decision.is_approved else "declined",
            "loan_amount": decision.loan_amount,
            "loan_period": decision.loan_period,
            "requested_period": requested_period,
            "error_code": decision.error_code,
            "duration_ms": duration_ms,
        },
    )
