from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from fod_dashboard.client.http import BaseHttpClient
from fod_dashboard.core.config import settings
from fod_dashboard.core.errors import NotFound, TransportFailure
from fod_dashboard.schemas import Directory, TeamDetail

SITE_SETTINGS_PATH = "/fod-bridge/v1/site-settings"


def build_http_client(base_url: str | None = None) -> BaseHttpClient:
    return BaseHttpClient(
        base_url=base_url or settings.api_base_url,
        timeout_s=settings.http_timeout_s,
        connect_timeout_s=settings.http_connect_timeout_s,
    )


class DashboardApiClient:
    """Typed access to the directory, roster and site-settings endpoints."""

    def __init__(self, *, http: BaseHttpClient) -> None:
        self.http = http

    def close(self) -> None:
        self.http.close()

    def get_directory(self) -> Directory:
        payload = self.http.get_json("/dashboard")
        try:
            return Directory.model_validate(payload)
        except ValidationError as e:
            raise TransportFailure(f"Malformed directory payload: {e.error_count()} error(s)") from e

    def get_team(self, team_id: str) -> TeamDetail:
        try:
            payload = self.http.get_json(f"/teams/{quote(team_id, safe='')}")
        except TransportFailure as e:
            if e.http_status == 404:
                raise NotFound(f"Team not found: {team_id}") from e
            raise

        try:
            return TeamDetail.model_validate(payload)
        except ValidationError as e:
            raise TransportFailure(f"Malformed team payload: {e.error_count()} error(s)") from e

    def get_site_settings(self, *, key: str) -> dict[str, Any]:
        return self.http.get_json(SITE_SETTINGS_PATH, params={"key": key})
