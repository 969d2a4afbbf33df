from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from fod_dashboard.db.models.core.team import Team
from fod_dashboard.db.repos.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=Team)

    def get_with_league(self, team_id: str) -> Team | None:
        stmt = (
            select(Team)
            .options(joinedload(Team.league))
            .where(Team.id == team_id)
            .limit(1)
        )
        return self.session.execute(stmt).scalars().first()

    def abbreviation_lookup(self) -> dict[tuple[str, str], Team]:
        """(league id, abbreviation) -> team, for teams that carry an abbreviation."""

        stmt = select(Team).where(Team.abbreviation.is_not(None))
        return {
            (t.league_id, t.abbreviation): t
            for t in self.session.execute(stmt).scalars().all()
            if t.abbreviation
        }
