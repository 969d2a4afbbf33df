"""FastAPI dependencies.

Everything a route needs is resolved from `app.state`, which `create_app`
populates; tests swap collaborators by passing them to `create_app`.
"""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from fod_dashboard.api.auth import SecretVerifier
from fod_dashboard.client.api import DashboardApiClient
from fod_dashboard.site_settings.store import OptionStore, SqlOptionStore


def get_db(request: Request) -> Iterator[Session]:
    """Request-scoped session; always closed, rolled back if the handler raised."""

    session = request.app.state.session_factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def get_option_store(session: Session = Depends(get_db)) -> OptionStore:
    return SqlOptionStore(session)


def get_secret_verifier(request: Request) -> SecretVerifier:
    return request.app.state.secret_verifier


def get_api_client(request: Request) -> Iterator[DashboardApiClient]:
    client = request.app.state.api_client_factory()
    try:
        yield client
    finally:
        client.close()
