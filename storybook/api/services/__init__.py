"""Services for the API layer."""

from .export_service import ExportService, ExportValidationError

__all__ = ["ExportService", "ExportValidationError"]
