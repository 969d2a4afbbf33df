from __future__ import annotations

from sqlalchemy.orm import Session

from fod_dashboard.db.repos.core.league_repo import LeagueRepository
from fod_dashboard.schemas import Directory, LeagueOut, TeamSummary


def list_leagues(session: Session) -> Directory:
    """Every league with its teams (id and name only), in storage order."""

    leagues = LeagueRepository(session).list_with_teams()
    return Directory(
        leagues=[
            LeagueOut(
                id=league.id,
                name=league.name,
                teams=[TeamSummary(id=t.id, name=t.name) for t in league.teams],
            )
            for league in leagues
        ]
    )
