from __future__ import annotations

from decimal import Decimal

from sqlalchemy.orm import Session

from fod_dashboard.db.models.core.league_setting import LeagueSetting
from fod_dashboard.db.repos.base import BaseRepository


class LeagueSettingRepository(BaseRepository[LeagueSetting]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=LeagueSetting)

    def upsert_luxury_tax_limit(self, *, league_id: str, year: int, limit: Decimal) -> bool:
        """Set the limit for (league, year). Returns True when a new row was created."""

        existing = self.first_where(
            LeagueSetting.league_id == league_id,
            LeagueSetting.year == year,
        )
        if existing is None:
            self.add(LeagueSetting(league_id=league_id, year=year, luxury_tax_limit=limit))
            return True

        existing.luxury_tax_limit = limit
        self.session.flush()
        return False
