"""Product endpoints."""

from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from .deps.services import get_product_catalog
from .schemas import ProductCreateRequest, ProductPriceRequest, ProductResponse
from .services import ProductCatalog
from .utils.responses import unwrap

router = APIRouter(prefix="/api/products", tags=["products"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProductResponse)
def create_product(
    payload: ProductCreateRequest,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    return unwrap(catalog.create(payload))


@router.put("/{product_id}/price", response_model=ProductResponse)
def change_price(
    product_id: uuid.UUID,
    payload: ProductPriceRequest,
    catalog: ProductCatalog = Depends(get_product_catalog),
):
    return unwrap(catalog.change_price(product_id, payload))


@router.get("", response_model=List[ProductResponse])
def list_products(catalog: ProductCatalog = Depends(get_product_catalog)):
    return catalog.find_all()
