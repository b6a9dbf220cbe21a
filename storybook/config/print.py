"""
Print-on-demand configuration for the Storybook export service.

Includes:
- Peecho endpoint and credentials from the environment
- Page-size to vendor product-code mapping
- Retry with exponential backoff for transient network errors
"""

import logging
import os

import httpx
from dotenv import load_dotenv
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..core.types import PageSizePreset

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

PRINT_CONSTANTS = {
    "peecho_api_url": os.getenv("PEECHO_API_URL", "https://api.peecho.com/v1/orders"),
    "timeout": 30,  # seconds per vendor call
    "quantity": 1,
    "shipping_method": "standard",
}

PEECHO_PRODUCT_CODES: dict[PageSizePreset, str] = {
    PageSizePreset.A5_PORTRAIT: "softcover-a5-portrait",
    PageSizePreset.A4_PORTRAIT: "softcover-a4-portrait",
    PageSizePreset.SQUARE_210: "softcover-square-210",
}

# Quotes returned by vendors that are not integrated yet
STUB_QUOTES = {
    "BOOKVAULT": {"name": "BookVault", "estimated_cost": "$12.99", "estimated_delivery": "7-10 business days"},
    "LULU": {"name": "Lulu", "estimated_cost": "$9.99", "estimated_delivery": "5-7 business days"},
    "GELATO": {"name": "Gelato", "estimated_cost": "$11.99", "estimated_delivery": "3-5 business days"},
}


def get_peecho_api_key() -> str:
    """Peecho API key from the environment, or an empty string."""
    return os.getenv("PEECHO_API_KEY", "")


# Retry decorator for vendor calls with network errors
print_retry = retry(
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=8),
    retry=retry_if_exception_type(httpx.TransportError),
    before_sleep=before_sleep_log(logger, logging.WARNING),
    reraise=True,
)
