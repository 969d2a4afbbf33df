"""Browser pages: the dashboard and roster views rendered to HTML."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from fod_dashboard.api.deps import get_api_client
from fod_dashboard.client.api import DashboardApiClient
from fod_dashboard.views.dashboard import DashboardView
from fod_dashboard.views.roster import RosterView
from fod_dashboard.views.state import Phase, ViewState

router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

PHASE_STATUS = {Phase.NOT_FOUND: 404, Phase.FAILED: 502}


def _status_for(state: ViewState[Any]) -> int:
    return PHASE_STATUS.get(state.phase, 200)


@router.get("/")
def dashboard_page(client: DashboardApiClient = Depends(get_api_client)) -> HTMLResponse:
    view = DashboardView(client)
    state = view.mount()
    html = view.render()
    view.unmount()
    return HTMLResponse(html, status_code=_status_for(state))


@router.get("/roster/{team_id}")
def roster_page(
    team_id: str, client: DashboardApiClient = Depends(get_api_client)
) -> HTMLResponse:
    view = RosterView(client, team_id)
    state = view.mount()
    html = view.render()
    view.unmount()
    return HTMLResponse(html, status_code=_status_for(state))
