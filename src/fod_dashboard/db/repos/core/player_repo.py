from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from fod_dashboard.db.models.core.player import Player
from fod_dashboard.db.repos.base import BaseRepository


class PlayerRepository(BaseRepository[Player]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=Player)

    def list_for_team(self, team_id: str) -> list[Player]:
        stmt = select(Player).where(Player.team_id == team_id).order_by(Player.row_id)
        return list(self.session.execute(stmt).scalars().all())
