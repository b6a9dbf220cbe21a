"""
Print-on-demand order submission.

Peecho is the only integrated vendor; BookVault, Lulu and Gelato return a
stubbed quote so the checkout flow can show them as coming soon.
"""

import logging
from enum import Enum
from typing import Any, Optional, Union

import httpx

from ..config import (
    PEECHO_PRODUCT_CODES,
    PRINT_CONSTANTS,
    STUB_QUOTES,
    get_peecho_api_key,
    print_retry,
)
from .types import PageSizePreset

logger = logging.getLogger(__name__)


class PrintProvider(str, Enum):
    """Supported print vendors."""

    PEECHO = "PEECHO"
    BOOKVAULT = "BOOKVAULT"
    LULU = "LULU"
    GELATO = "GELATO"


class PrintOrderError(Exception):
    """A print vendor rejected the order or could not be reached."""

    def __init__(self, provider: PrintProvider, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class ProviderNotConfiguredError(PrintOrderError):
    """The vendor's credentials are missing from the environment."""


def get_product_code(page_size: Union[PageSizePreset, str, None]) -> str:
    """Peecho product code for a page size (unknown sizes map to A5 portrait)."""
    return PEECHO_PRODUCT_CODES[PageSizePreset.parse(page_size)]


class PrintOrderClient:
    """Submits finished print PDFs to a print-on-demand vendor."""

    def __init__(self, peecho_api_key: Optional[str] = None, peecho_api_url: Optional[str] = None):
        self.peecho_api_key = peecho_api_key if peecho_api_key is not None else get_peecho_api_key()
        self.peecho_api_url = peecho_api_url or PRINT_CONSTANTS["peecho_api_url"]

    async def create_order(
        self,
        provider: PrintProvider,
        pdf_url: str,
        page_size: Union[PageSizePreset, str],
    ) -> dict[str, Any]:
        """
        Place an order for one copy of the book.

        Args:
            provider: Vendor to order from
            pdf_url: Publicly reachable URL of the print PDF
            page_size: Page-size preset the PDF was rendered at

        Returns:
            The vendor's order payload (or a stubbed quote)

        Raises:
            ValueError: If pdf_url is blank
            ProviderNotConfiguredError: If the vendor has no API key
            PrintOrderError: If the vendor call fails
        """
        if not pdf_url or not pdf_url.strip():
            raise ValueError("PDF URL is required")

        preset = PageSizePreset.parse(page_size)
        logger.info(f"Creating print order with {provider.value} for {preset.value}")

        if provider == PrintProvider.PEECHO:
            return await self._create_peecho_order(pdf_url, preset)

        quote = STUB_QUOTES[provider.value]
        return {
            "provider": provider.value,
            "status": "stubbed",
            "message": f"{quote['name']} integration coming soon",
            "estimated_cost": quote["estimated_cost"],
            "estimated_delivery": quote["estimated_delivery"],
        }

    async def _create_peecho_order(self, pdf_url: str, preset: PageSizePreset) -> dict[str, Any]:
        if not self.peecho_api_key:
            raise ProviderNotConfiguredError(PrintProvider.PEECHO, "Peecho API key not configured")

        payload = {
            "product_code": get_product_code(preset),
            "pdf_url": pdf_url,
            "quantity": PRINT_CONSTANTS["quantity"],
            "shipping": {"method": PRINT_CONSTANTS["shipping_method"]},
        }

        try:
            response = await self._post_peecho(payload)
        except httpx.RequestError as e:
            logger.error(f"Peecho request failed: {e}")
            raise PrintOrderError(
                PrintProvider.PEECHO, f"Failed to connect to Peecho: {e}"
            ) from e

        if response.status_code >= 400:
            logger.error(f"Peecho API error: {response.status_code} - {response.text}")
            raise PrintOrderError(
                PrintProvider.PEECHO,
                f"Peecho API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
            )

        return response.json()

    @print_retry
    async def _post_peecho(self, payload: dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=PRINT_CONSTANTS["timeout"]) as client:
            return await client.post(
                self.peecho_api_url,
                headers={"Authorization": f"Bearer {self.peecho_api_key}"},
                json=payload,
            )
