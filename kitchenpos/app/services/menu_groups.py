"""Menu group operations."""

from __future__ import annotations

import logging

from ..domain import MenuGroup, Result
from ..domain.result import Ok, invalid_argument
from ..repos import MenuGroupsRepo
from ..schemas import MenuGroupCreateRequest

logger = logging.getLogger("kitchenpos.menu_groups")


class MenuGroupCatalog:
    def __init__(self, menu_groups: MenuGroupsRepo) -> None:
        self.menu_groups = menu_groups

    def create(self, request: MenuGroupCreateRequest) -> Result[MenuGroup]:
        name = request.name
        if name is None or not name.strip():
            logger.debug("rejected menu group with blank name")
            return invalid_argument("menu group name must not be blank")
        menu_group = self.menu_groups.save(MenuGroup(name=name))
        logger.info("menu group created id=%s name=%s", menu_group.id, name)
        return Ok(menu_group)

    def find_all(self) -> list[MenuGroup]:
        return self.menu_groups.find_all()
