"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus an ExportLogger helper for export events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Extra fields copied from log records into the JSON payload
STRUCTURED_FIELDS = (
    "stage",
    "variant",
    "page_size",
    "page_count",
    "error_count",
    "provider",
    "duration",
    "error_type",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for name in STRUCTURED_FIELDS:
            if hasattr(record, name):
                log_data[name] = getattr(record, name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create console handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class ExportLogger:
    """Logger for export and print-order events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("storybook_export")

    def export_started(self, page_count: int, page_size: str) -> None:
        self.logger.info(
            f"Generating PDFs for {page_count} pages",
            extra={"stage": "started", "page_count": page_count, "page_size": page_size},
        )

    def validation_failed(self, error_count: int) -> None:
        self.logger.warning(
            f"Export blocked by {error_count} validation errors",
            extra={"stage": "validation", "error_count": error_count},
        )

    def variant_rendered(self, variant: str, page_count: int, duration: Optional[float] = None) -> None:
        extra = {"stage": "rendered", "variant": variant, "page_count": page_count}
        if duration:
            extra["duration"] = round(duration, 3)
        self.logger.info(f"Rendered {variant} PDF", extra=extra)

    def export_completed(self, page_count: int, duration: float) -> None:
        self.logger.info(
            "Export completed",
            extra={"stage": "completed", "page_count": page_count, "duration": round(duration, 3)},
        )

    def print_order_submitted(self, provider: str, page_size: str) -> None:
        self.logger.info(
            f"Print order submitted to {provider}",
            extra={"stage": "print_order", "provider": provider, "page_size": page_size},
        )

    def print_order_failed(self, provider: str, error: Exception) -> None:
        self.logger.error(
            f"Print order failed: {error}",
            extra={"stage": "print_order", "provider": provider, "error_type": type(error).__name__},
        )


# Global export logger instance
export_logger = ExportLogger()
