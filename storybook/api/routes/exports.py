"""Export endpoints: readiness check and PDF generation."""

from fastapi import APIRouter, HTTPException, status

from ..dependencies import Exporter
from ..models.requests import ExportPdfRequest, ValidateExportRequest
from ..models.responses import (
    ExportResponse,
    PageDimensionsResponse,
    PageSizeResponse,
    PageStatusResponse,
    ValidateExportResponse,
    ValidationErrorResponse,
)
from ..services.export_service import ExportValidationError, to_data_url

router = APIRouter()


@router.post(
    "/validate",
    response_model=ValidateExportResponse,
    summary="Check a book before export",
    description="Per-page word-count status and export-blocking rules, plus incomplete setup fields.",
)
async def validate_export(request: ValidateExportRequest, exporter: Exporter):
    """Check every page against its reading level and image rule, and the setup form."""
    check = exporter.check(request.config.to_config(), request.to_pages())

    return ValidateExportResponse(
        is_valid=check.is_valid,
        errors=[ValidationErrorResponse(field=e.field, message=e.message) for e in check.errors],
        pages=[PageStatusResponse(**vars(report)) for report in check.pages],
        config_errors=[
            ValidationErrorResponse(field=e.field, message=e.message) for e in check.config_errors
        ],
    )


@router.post(
    "/pdf",
    response_model=ExportResponse,
    summary="Generate web and print PDFs",
    description="Render the cover and every page at trim size (web) and with bleed (print).",
    responses={422: {"description": "Book failed validation"}},
)
async def export_pdf(request: ExportPdfRequest, exporter: Exporter):
    """Render both PDFs and return them as data URLs."""
    config = request.config.to_config()

    try:
        result = exporter.export(
            config,
            request.to_pages(),
            enforce_validation=request.enforce_validation,
        )
    except ExportValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "message": "Book is not ready to export",
                "errors": [{"field": err.field, "message": err.message} for err in e.errors],
            },
        )

    size = result.page_size
    return ExportResponse(
        web_pdf_url=to_data_url(result.web_pdf),
        print_pdf_url=to_data_url(result.print_pdf),
        web_filename=result.web_filename,
        print_filename=result.print_filename,
        page_count=result.page_count,
        dimensions=PageSizeResponse(
            content=PageDimensionsResponse(
                width_mm=size.content.width_mm, height_mm=size.content.height_mm
            ),
            with_bleed=PageDimensionsResponse(
                width_mm=size.with_bleed.width_mm, height_mm=size.with_bleed.height_mm
            ),
        ),
    )
