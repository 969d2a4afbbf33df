from __future__ import annotations

from sqlalchemy.orm import Session

from fod_dashboard.core.errors import NotFound
from fod_dashboard.db.models.core.player import Player
from fod_dashboard.db.repos.core.player_repo import PlayerRepository
from fod_dashboard.db.repos.core.team_repo import TeamRepository
from fod_dashboard.schemas import PlayerOut, TeamDetail


def _player_out(p: Player) -> PlayerOut:
    return PlayerOut(
        id=p.id,
        first_name=p.first_name,
        last_name=p.last_name,
        position=p.position,
        mlb_team=p.mlb_team,
        status=p.status,
        status_40_man=p.status_40_man,
        status_26_man=p.status_26_man,
        status_il=p.status_il,
    )


def get_team_detail(session: Session, team_id: str) -> TeamDetail:
    """
    Team identity, owner and full roster for one team.

    The id is only checked for being non-blank; existence is up to the store.
    Raises NotFound for blank or unknown ids.
    """

    if not team_id or not team_id.strip():
        raise NotFound("Team id is required")

    team = TeamRepository(session).get_with_league(team_id)
    if team is None:
        raise NotFound(f"Team not found: {team_id}")

    players = PlayerRepository(session).list_for_team(team.id)

    return TeamDetail(
        id=team.id,
        name=team.name,
        owner=team.owner_name,
        league_id=team.league_id,
        league_name=team.league.name,
        isbp_balance=team.isbp_balance,
        milb_balance=team.milb_balance,
        players=[_player_out(p) for p in players],
    )
