"""Response payloads shared by the API and the dashboard views.

All models are frozen: a payload is a snapshot built for one response and is
never mutated afterwards.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)


class TeamSummary(_Snapshot):
    id: str
    name: str


class LeagueOut(_Snapshot):
    id: str
    name: str
    teams: list[TeamSummary] = Field(default_factory=list)


class Directory(_Snapshot):
    leagues: list[LeagueOut] = Field(default_factory=list)


class PlayerOut(_Snapshot):
    id: str
    first_name: str
    last_name: str
    position: str
    mlb_team: str
    status: str
    status_40_man: bool = False
    status_26_man: bool = False
    status_il: str | None = None


class TeamDetail(_Snapshot):
    id: str
    name: str
    owner: str
    league_id: str | None = None
    league_name: str | None = None
    isbp_balance: Decimal = Decimal("0")
    milb_balance: Decimal = Decimal("0")
    players: list[PlayerOut] = Field(default_factory=list)
