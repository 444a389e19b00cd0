"""SQLAlchemy implementation of the menu group repository."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from .. import models
from ..domain import MenuGroup
from ..repos.menu_groups_repo import MenuGroupsRepo


def _to_domain(row: models.MenuGroup) -> MenuGroup:
    return MenuGroup(id=row.id, name=row.name)


class MenuGroupsRepoSQL(MenuGroupsRepo):
    """Concrete MenuGroupsRepo using a SQLAlchemy ``Session``."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, menu_group_id: uuid.UUID) -> MenuGroup | None:
        row = self.session.get(models.MenuGroup, menu_group_id)
        return _to_domain(row) if row is not None else None

    def save(self, menu_group: MenuGroup) -> MenuGroup:
        row = self.session.get(models.MenuGroup, menu_group.id)
        if row is None:
            row = models.MenuGroup(id=menu_group.id)
            self.session.add(row)
        row.name = menu_group.name
        self.session.commit()
        return menu_group

    def find_all(self) -> list[MenuGroup]:
        result = self.session.execute(
            select(models.MenuGroup).order_by(
                models.MenuGroup.created_at, models.MenuGroup.id
            )
        )
        return [_to_domain(row) for row in result.scalars()]
