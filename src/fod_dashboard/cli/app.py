from __future__ import annotations

import typer

import fod_dashboard.db.models  # noqa: F401
from fod_dashboard.cli.common import build_engine, session_scope
from fod_dashboard.client.api import DashboardApiClient, build_http_client
from fod_dashboard.core.config import settings
from fod_dashboard.core.errors import TransportFailure
from fod_dashboard.core.logging import configure_logging
from fod_dashboard.db.base import Base
from fod_dashboard.sync.site_settings import sync_site_settings

app = typer.Typer(no_args_is_help=True, help="FOD dashboard API and maintenance jobs.")


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", help="Override LOG_LEVEL (e.g. DEBUG)."
    ),
) -> None:
    configure_logging(log_level or settings.log_level)


@app.command("serve")
def serve_cmd(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8080, "--port"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on code changes (dev only)."),
) -> None:
    """Run the API and dashboard pages."""

    import uvicorn

    uvicorn.run(
        "fod_dashboard.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


@app.command("init-db")
def init_db_cmd() -> None:
    """Create all tables in DATABASE_URL (local/dev; use Alembic for managed databases)."""

    Base.metadata.create_all(build_engine())
    typer.echo("Database tables created.")


@app.command("sync-site-settings")
def sync_site_settings_cmd(
    base_url: str | None = typer.Option(
        None, "--base-url", help="Bridge root URL (defaults to BRIDGE_BASE_URL)."
    ),
) -> None:
    """Pull the remote site-settings document and apply balances and luxury-tax limits."""

    key = settings.require_bridge_secret()
    client = DashboardApiClient(http=build_http_client(base_url or settings.bridge_base_url))

    try:
        with session_scope() as session:
            result = sync_site_settings(session, client=client, key=key)
    except TransportFailure as e:
        typer.echo(f"ERROR fetching site settings: {e}", err=True)
        raise typer.Exit(code=1) from e
    finally:
        client.close()

    typer.echo(
        " ".join(
            [
                "Site settings sync complete:",
                f"isbp_updated={result.isbp_updated}",
                f"milb_updated={result.milb_updated}",
                f"balances_skipped={result.balances_skipped}",
                f"luxury_tax_upserts={result.luxury_tax_upserts}",
            ]
        )
    )
