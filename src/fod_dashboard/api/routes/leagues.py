"""League directory and team roster endpoints consumed by the dashboard views."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from fod_dashboard.api.deps import get_db
from fod_dashboard.schemas import Directory, TeamDetail
from fod_dashboard.services.directory import list_leagues
from fod_dashboard.services.roster import get_team_detail

router = APIRouter(tags=["leagues"])


@router.get("/dashboard", response_model=Directory)
def dashboard(db: Session = Depends(get_db)) -> Directory:
    return list_leagues(db)


@router.get("/teams/{team_id}", response_model=TeamDetail)
def team(team_id: str, db: Session = Depends(get_db)) -> TeamDetail:
    """Roster for one team. Unknown ids answer 404 `{"error": "not_found"}`."""

    return get_team_detail(db, team_id)
