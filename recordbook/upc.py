"""
Client for the third-party UPC product lookup service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import requests
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Product(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool = False
    barcode: str = ""
    title: str = ""
    alias: str = ""
    description: str = ""
    brand: str = ""
    manufacturer: str = ""
    mpn: str = ""
    msrp: str = ""
    asin: str = Field(default="", alias="ASIN")
    category: str = ""


class UpcLookupError(Exception):
    pass


class UpcClient(Protocol):
    def get_product(self, code: str) -> Product:
        ...


@dataclass
class HttpUpcClient:
    """Looks products up over HTTP, passing the API key as a query parameter."""

    endpoint: str
    api_key: Optional[str] = None
    timeout: float = 5.0
    session: requests.Session = field(default_factory=requests.Session)

    def get_product(self, code: str) -> Product:
        logger.info("Getting product by UPC code")
        url = f"{self.endpoint.rstrip('/')}/product/{code}"
        params = {"apikey": self.api_key} if self.api_key else None
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return Product.model_validate(response.json())
        except (requests.RequestException, ValueError) as exc:
            raise UpcLookupError(f"UPC lookup failed for {code}: {exc}") from exc
