from __future__ import annotations

import logging
from html import escape

from fod_dashboard.client.api import DashboardApiClient
from fod_dashboard.core.errors import NotFound, TransportFailure
from fod_dashboard.schemas import PlayerOut, TeamDetail
from fod_dashboard.views.layout import page
from fod_dashboard.views.state import Phase, ViewController, ViewState

logger = logging.getLogger(__name__)

LOADING_TEXT = "Scouting Roster..."
NOT_FOUND_TEXT = "Team not found."
FAILED_TEXT = "Could not load this roster."
NO_PLAYERS_TEXT = "No players on this roster."

COLUMNS = ("Pos", "Player", "MLB Team", "Status")


class RosterView(ViewController[TeamDetail]):
    """One team's identity and player table, keyed by the team id from the URL."""

    def __init__(self, client: DashboardApiClient, team_id: str) -> None:
        super().__init__()
        self.client = client
        self.team_id = team_id

    def mount(self) -> ViewState[TeamDetail]:
        handle = self.begin()
        self.deliver(handle, self.fetch())
        return self.state

    def navigate(self, team_id: str) -> ViewState[TeamDetail]:
        self.team_id = team_id
        return self.mount()

    def fetch(self) -> ViewState[TeamDetail]:
        try:
            return ViewState.loaded(self.client.get_team(self.team_id))
        except NotFound:
            return ViewState.not_found()
        except TransportFailure as e:
            logger.warning("Failed to load roster for team %s: %s", self.team_id, e)
            return ViewState.failed(str(e))

    def render(self) -> str:
        state = self.state
        if state.phase is Phase.LOADING:
            return page("Roster", f'<div class="loading">{LOADING_TEXT}</div>')
        if state.phase is Phase.NOT_FOUND:
            return page("Roster", f'<div class="not-found">{NOT_FOUND_TEXT}</div>')
        if state.phase is Phase.FAILED or state.data is None:
            return page("Roster", f'<div class="error">{FAILED_TEXT}</div>')

        team = state.data
        if team.players:
            rows = "\n".join(_player_row(p) for p in team.players)
        else:
            rows = f'<tr><td colspan="{len(COLUMNS)}" class="empty">{NO_PLAYERS_TEXT}</td></tr>'

        head = "".join(f"<th>{c}</th>" for c in COLUMNS)
        body = (
            '<a href="/">&larr; Back to Dashboard</a>'
            '<div class="team-header">'
            f"<h1>{escape(team.name)}</h1>"
            f"<p>Owner: <span>{escape(team.owner)}</span></p>"
            "</div>"
            "<h2>Active Roster</h2>"
            f"<table>\n<thead><tr>{head}</tr></thead>\n<tbody>\n{rows}\n</tbody>\n</table>"
        )
        return page(team.name, body)


def _player_row(p: PlayerOut) -> str:
    return (
        f'<tr data-player-id="{escape(p.id)}">'
        f"<td>{escape(p.position)}</td>"
        f"<td>{escape(p.first_name)} {escape(p.last_name)}</td>"
        f"<td>{escape(p.mlb_team)}</td>"
        f'<td><span class="status">{escape(p.status)}</span></td>'
        "</tr>"
    )
