"""Pydantic models for API requests and responses."""

from .requests import (
    ExportPdfRequest,
    PageInput,
    PrintOrderRequest,
    StoryConfigInput,
    ValidateExportRequest,
)
from .responses import (
    ExportResponse,
    PageSizeResponse,
    PageStatusResponse,
    PresetsResponse,
    PrintOrderResponse,
    ValidateExportResponse,
    ValidationErrorResponse,
)

__all__ = [
    "ExportPdfRequest",
    "PageInput",
    "PrintOrderRequest",
    "StoryConfigInput",
    "ValidateExportRequest",
    "ExportResponse",
    "PageSizeResponse",
    "PageStatusResponse",
    "PresetsResponse",
    "PrintOrderResponse",
    "ValidateExportResponse",
    "ValidationErrorResponse",
]
