"""FastAPI dependency injection for services and clients."""

from typing import Annotated

from fastapi import Depends

from ..core.print_orders import PrintOrderClient
from .services.export_service import ExportService


def get_export_service() -> ExportService:
    """Get an ExportService using the default font metrics."""
    return ExportService()


def get_print_order_client() -> PrintOrderClient:
    """Get a PrintOrderClient configured from the environment."""
    return PrintOrderClient()


# Type aliases for cleaner route signatures
Exporter = Annotated[ExportService, Depends(get_export_service)]
PrintClient = Annotated[PrintOrderClient, Depends(get_print_order_client)]
