from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from fod_dashboard.db.models.core.league import League
from fod_dashboard.db.repos.base import BaseRepository


class LeagueRepository(BaseRepository[League]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=League)

    def get_by_name(self, name: str) -> League | None:
        return self.first_where(League.name == name)

    def list_with_teams(self) -> list[League]:
        """All leagues in storage order, teams eager-loaded in storage order."""

        stmt = select(League).options(selectinload(League.teams)).order_by(League.row_id)
        return list(self.session.execute(stmt).scalars().all())
