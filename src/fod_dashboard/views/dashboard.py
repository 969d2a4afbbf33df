from __future__ import annotations

import logging
from html import escape
from urllib.parse import quote

from fod_dashboard.client.api import DashboardApiClient
from fod_dashboard.core.errors import TransportFailure
from fod_dashboard.schemas import Directory, LeagueOut
from fod_dashboard.views.layout import page
from fod_dashboard.views.state import Phase, ViewController, ViewState

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading Commissioner Data..."
FAILED_TEXT = "Could not load league data."
NO_TEAMS_TEXT = "No teams in this league yet."
NO_LEAGUES_TEXT = "No leagues yet."


def roster_href(team_id: str) -> str:
    return f"/roster/{quote(team_id, safe='')}"


class DashboardView(ViewController[Directory]):
    """League directory rendered as a grid of league cards."""

    def __init__(self, client: DashboardApiClient) -> None:
        super().__init__()
        self.client = client

    def mount(self) -> ViewState[Directory]:
        handle = self.begin()
        self.deliver(handle, self.fetch())
        return self.state

    def fetch(self) -> ViewState[Directory]:
        try:
            return ViewState.loaded(self.client.get_directory())
        except TransportFailure as e:
            logger.warning("Failed to load dashboard: %s", e)
            return ViewState.failed(str(e))

    def render(self) -> str:
        state = self.state
        if state.phase is Phase.LOADING:
            return page("Dashboard", f'<div class="loading">{LOADING_TEXT}</div>')
        if state.phase is Phase.FAILED or state.data is None:
            return page("Dashboard", f'<div class="error">{FAILED_TEXT}</div>')

        leagues = state.data.leagues
        if leagues:
            cards = "\n".join(_league_card(lg) for lg in leagues)
        else:
            cards = f'<p class="empty">{NO_LEAGUES_TEXT}</p>'

        body = (
            "<header>"
            "<h1>Moneyball Dynasty</h1>"
            "<p>League Operations Center</p>"
            "</header>"
            f'<div class="grid">\n{cards}\n</div>'
        )
        return page("Dashboard", body)


def _league_card(league: LeagueOut) -> str:
    if league.teams:
        rows = "\n".join(
            f'<li class="team"><span>{escape(t.name)}</span> '
            f'<a href="{escape(roster_href(t.id))}">Manage &rarr;</a></li>'
            for t in league.teams
        )
        teams = f"<ul>\n{rows}\n</ul>"
    else:
        teams = f'<p class="empty">{NO_TEAMS_TEXT}</p>'

    return (
        f'<section class="league" data-league-id="{escape(league.id)}">'
        f"<h2>{escape(league.name)}</h2>"
        "<h3>Teams</h3>"
        f"{teams}"
        "</section>"
    )
