"""Menu endpoints."""

from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, status

from .deps.services import get_menu_catalog
from .schemas import MenuCreateRequest, MenuPriceRequest, MenuResponse
from .services import MenuCatalog
from .utils.responses import unwrap

router = APIRouter(prefix="/api/menus", tags=["menus"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MenuResponse)
def create_menu(
    payload: MenuCreateRequest,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    return unwrap(catalog.create(payload))


@router.put("/{menu_id}/price", response_model=MenuResponse)
def change_price(
    menu_id: uuid.UUID,
    payload: MenuPriceRequest,
    catalog: MenuCatalog = Depends(get_menu_catalog),
):
    return unwrap(catalog.change_price(menu_id, payload))


@router.put("/{menu_id}/display", response_model=MenuResponse)
def display_menu(menu_id: uuid.UUID, catalog: MenuCatalog = Depends(get_menu_catalog)):
    return unwrap(catalog.display(menu_id))


@router.put("/{menu_id}/hide", response_model=MenuResponse)
def hide_menu(menu_id: uuid.UUID, catalog: MenuCatalog = Depends(get_menu_catalog)):
    return unwrap(catalog.hide(menu_id))


@router.get("", response_model=List[MenuResponse])
def list_menus(catalog: MenuCatalog = Depends(get_menu_catalog)):
    return catalog.find_all()
