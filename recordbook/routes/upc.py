"""
UPC product lookup route.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_upc_client
from recordbook.errors import ERR_BAD_REQUEST, ValidationError
from recordbook.schemas import UpcProductResponse
from recordbook.upc import UpcClient, UpcLookupError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["UPC"])


@router.get("/upc/{code}", response_model=UpcProductResponse)
def get_product_by_upc(
    code: str,
    claims: Claims = Depends(get_claims),
    upc_client: UpcClient = Depends(get_upc_client),
):
    try:
        product = upc_client.get_product(code)
    except UpcLookupError as exc:
        logger.warning("UPC lookup failed: %s", exc)
        raise ValidationError(ERR_BAD_REQUEST) from exc
    return UpcProductResponse(product=product)
