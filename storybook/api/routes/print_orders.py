"""Print order endpoint."""

from fastapi import APIRouter, HTTPException, status

from ...core.print_orders import PrintOrderError, ProviderNotConfiguredError
from ..dependencies import PrintClient
from ..logging import export_logger
from ..models.requests import PrintOrderRequest
from ..models.responses import PrintOrderResponse

router = APIRouter()


@router.post(
    "/",
    response_model=PrintOrderResponse,
    summary="Place a print order",
    description="Send the print PDF to a print-on-demand vendor.",
    responses={
        422: {"description": "Missing PDF URL"},
        502: {"description": "Vendor rejected the order or was unreachable"},
        503: {"description": "Vendor not configured"},
    },
)
async def create_print_order(request: PrintOrderRequest, client: PrintClient):
    """Place an order with the requested vendor."""
    provider = request.provider.value

    try:
        order = await client.create_order(request.provider, request.pdf_url, request.page_size)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except ProviderNotConfiguredError as e:
        export_logger.print_order_failed(provider, e)
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))
    except PrintOrderError as e:
        export_logger.print_order_failed(provider, e)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    export_logger.print_order_submitted(provider, request.page_size.value)

    return PrintOrderResponse(
        provider=provider,
        order=order,
        pdf_url=request.pdf_url,
        page_size=request.page_size.value,
    )
