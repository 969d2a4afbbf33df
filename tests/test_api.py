from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import sqlalchemy as sa
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import fod_dashboard.db.models  # noqa: F401
from fod_dashboard.api.app import create_app
from fod_dashboard.api.auth import SecretVerifier
from fod_dashboard.client.api import DashboardApiClient
from fod_dashboard.client.http import BaseHttpClient
from fod_dashboard.core.config import Settings
from fod_dashboard.db import create_session_factory
from fod_dashboard.db.base import Base
from fod_dashboard.db.models.core.league import League
from fod_dashboard.db.models.core.player import Player
from fod_dashboard.db.models.core.team import Team
from fod_dashboard.db.repos.settings.site_option_repo import SiteOptionRepository
from fod_dashboard.site_settings.fields import known_keys

SECRET = "current-secret"
OLD_SECRET = "previous-secret"


def _make_session_factory(*, create_tables: bool = True) -> sessionmaker[Session]:
    engine = sa.create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    if create_tables:
        Base.metadata.create_all(engine)
    return create_session_factory(engine)


def _unused_api_client() -> DashboardApiClient:
    raise AssertionError("pages are not exercised by this test")


def _make_client(
    session_factory: sessionmaker[Session],
    api_client_factory: Callable[[], DashboardApiClient] = _unused_api_client,
) -> TestClient:
    app = create_app(
        Settings(log_level="WARNING"),
        session_factory=session_factory,
        secret_verifier=SecretVerifier.from_secrets([SECRET, OLD_SECRET]),
        api_client_factory=api_client_factory,
    )
    return TestClient(app)


def _seed_team(session_factory: sessionmaker[Session]) -> str:
    with session_factory() as session:
        league = League(name="MLB")
        team = Team(league=league, name="Aces", owner_name="Pat")
        session.add_all([league, team])
        session.flush()
        session.add(Player(team_id=team.id, first_name="Sam", last_name="Slider", position="RP"))
        session.commit()
        return team.id


def test_health() -> None:
    client = _make_client(_make_session_factory())

    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "api"}


def test_site_settings_with_valid_key_returns_every_key() -> None:
    session_factory = _make_session_factory()
    with session_factory() as session:
        SiteOptionRepository(session).set_value("luxury_tax_thresholds", {"2026": 250000000})
        session.commit()
    client = _make_client(session_factory)

    resp = client.get("/fod-bridge/v1/site-settings", params={"key": SECRET})

    assert resp.status_code == 200
    body = resp.json()
    assert set(body.keys()) == set(known_keys())
    assert body["luxury_tax_thresholds"] == {"2026": 250000000}
    assert body["isbp_mlb"] == []


def test_site_settings_accepts_previous_secret() -> None:
    client = _make_client(_make_session_factory())

    resp = client.get("/fod-bridge/v1/site-settings", params={"key": OLD_SECRET})

    assert resp.status_code == 200


def test_site_settings_with_wrong_key_is_unauthorized() -> None:
    session_factory = _make_session_factory()
    with session_factory() as session:
        SiteOptionRepository(session).set_value("isbp_mlb", [{"team_id": "NYY", "balance": 5}])
        session.commit()
    client = _make_client(session_factory)

    resp = client.get("/fod-bridge/v1/site-settings", params={"key": "fod-migrate-2026"})

    assert resp.status_code == 403
    body = resp.json()
    assert body["error"] == "unauthorized"
    assert "isbp_mlb" not in body


def test_site_settings_without_key_is_unauthorized() -> None:
    client = _make_client(_make_session_factory())

    resp = client.get("/fod-bridge/v1/site-settings")

    assert resp.status_code == 403


def test_site_settings_without_option_table_is_dependency_missing() -> None:
    client = _make_client(_make_session_factory(create_tables=False))

    resp = client.get("/fod-bridge/v1/site-settings", params={"key": SECRET})

    assert resp.status_code == 500
    assert resp.json()["error"] == "acf_missing"


def test_site_settings_with_unreachable_database_is_dependency_missing(tmp_path: Path) -> None:
    db_path = tmp_path / "missing-dir" / "fod.db"
    engine = sa.create_engine(f"sqlite+pysqlite:///{db_path}")
    client = _make_client(create_session_factory(engine))

    resp = client.get("/fod-bridge/v1/site-settings", params={"key": SECRET})

    assert resp.status_code == 500
    assert resp.json()["error"] == "acf_missing"


def test_dashboard_on_empty_store() -> None:
    client = _make_client(_make_session_factory())

    resp = client.get("/dashboard")

    assert resp.status_code == 200
    assert resp.json() == {"leagues": []}


def test_dashboard_and_team_detail() -> None:
    session_factory = _make_session_factory()
    team_id = _seed_team(session_factory)
    client = _make_client(session_factory)

    leagues = client.get("/dashboard").json()["leagues"]
    assert leagues[0]["name"] == "MLB"
    assert leagues[0]["teams"] == [{"id": team_id, "name": "Aces"}]

    resp = client.get(f"/teams/{team_id}")
    assert resp.status_code == 200
    detail = resp.json()
    assert detail["id"] == team_id
    assert detail["owner"] == "Pat"
    assert detail["players"][0]["last_name"] == "Slider"
    assert detail["players"][0]["status"] == "Minors (Non-40)"


def test_unknown_team_is_not_found() -> None:
    client = _make_client(_make_session_factory())

    resp = client.get("/teams/nope")

    assert resp.status_code == 404
    assert resp.json()["error"] == "not_found"


def _page_client(handler: Callable[[httpx.Request], httpx.Response]) -> TestClient:
    def factory() -> DashboardApiClient:
        http = BaseHttpClient(base_url="http://api.test", transport=httpx.MockTransport(handler))
        return DashboardApiClient(http=http)

    return _make_client(_make_session_factory(), api_client_factory=factory)


def test_dashboard_page_links_each_team_to_its_roster() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/dashboard"
        return httpx.Response(
            200,
            json={
                "leagues": [
                    {"id": "l1", "name": "MLB", "teams": [{"id": "t1", "name": "Aces"}]},
                    {"id": "l2", "name": "AAA", "teams": []},
                ]
            },
        )

    resp = _page_client(handler).get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert 'href="/roster/t1"' in resp.text
    assert "No teams in this league yet." in resp.text


def test_dashboard_page_reports_upstream_failure() -> None:
    resp = _page_client(lambda request: httpx.Response(500)).get("/")

    assert resp.status_code == 502
    assert "Could not load league data." in resp.text


def test_roster_page_for_unknown_team() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "not_found", "message": "Team not found"})

    resp = _page_client(handler).get("/roster/missing")

    assert resp.status_code == 404
    assert "Team not found." in resp.text


def test_roster_page_reports_upstream_failure_as_bad_gateway() -> None:
    resp = _page_client(lambda request: httpx.Response(503)).get("/roster/some-team")

    assert resp.status_code == 502
    assert "Could not load this roster." in resp.text
    assert "Team not found." not in resp.text
