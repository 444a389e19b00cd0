"""Menu group endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from .deps.services import get_menu_group_catalog
from .schemas import MenuGroupCreateRequest, MenuGroupResponse
from .services import MenuGroupCatalog
from .utils.responses import unwrap

router = APIRouter(prefix="/api/menu-groups", tags=["menu-groups"])


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=MenuGroupResponse
)
def create_menu_group(
    payload: MenuGroupCreateRequest,
    catalog: MenuGroupCatalog = Depends(get_menu_group_catalog),
):
    return unwrap(catalog.create(payload))


@router.get("", response_model=List[MenuGroupResponse])
def list_menu_groups(catalog: MenuGroupCatalog = Depends(get_menu_group_catalog)):
    return catalog.find_all()
