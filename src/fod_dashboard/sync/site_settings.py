from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from fod_dashboard.client.api import DashboardApiClient
from fod_dashboard.core.text import parse_number
from fod_dashboard.db.models.core.league import League
from fod_dashboard.db.repos.core.league_repo import LeagueRepository
from fod_dashboard.db.repos.core.league_setting_repo import LeagueSettingRepository
from fod_dashboard.db.repos.core.team_repo import TeamRepository
from fod_dashboard.site_settings.fields import LEAGUE_CODES

logger = logging.getLogger(__name__)

# CMS league suffix -> local league name
LEAGUE_NAMES: dict[str, str] = {
    "mlb": "MLB",
    "aaa": "AAA",
    "aa": "AA",
    "high_a": "High A",
}

BALANCE_COLUMNS: dict[str, str] = {
    "isbp": "isbp_balance",
    "milb": "milb_balance",
}


@dataclass(frozen=True)
class SyncSiteSettingsResult:
    isbp_updated: int
    milb_updated: int
    balances_skipped: int
    luxury_tax_upserts: int


def _rows(document: Mapping[str, Any], key: str) -> list[Mapping[str, Any]]:
    value = document.get(key)
    if not isinstance(value, list):
        return []
    return [row for row in value if isinstance(row, Mapping)]


def _tax_rows(document: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    # accepted as a list of {year, limit} rows or a {year: limit} mapping
    value = document.get("luxury_tax_thresholds")
    if isinstance(value, Mapping):
        return [{"year": year, "limit": limit} for year, limit in value.items()]
    return _rows(document, "luxury_tax_thresholds")


def _local_leagues(session: Session) -> dict[str, League]:
    repo = LeagueRepository(session)
    found: dict[str, League] = {}
    for code in LEAGUE_CODES:
        league = repo.get_by_name(LEAGUE_NAMES[code])
        if league is None:
            logger.warning("League %r not found locally; skipping its settings", LEAGUE_NAMES[code])
            continue
        found[code] = league
    return found


def apply_site_settings(session: Session, document: Mapping[str, Any]) -> SyncSiteSettingsResult:
    """
    Write ISBP/MILB balances and luxury-tax thresholds from a settings document.

    Balance rows are `{team_id: <abbreviation>, balance}` and are matched to
    local teams by (league, abbreviation); unmatched rows are skipped. Tax rows
    `{year, limit}` apply to every local league; zero or invalid rows are skipped.
    """

    leagues = _local_leagues(session)
    teams = TeamRepository(session).abbreviation_lookup()

    updated = {prefix: 0 for prefix in BALANCE_COLUMNS}
    skipped = 0

    for prefix, column in BALANCE_COLUMNS.items():
        for code, league in leagues.items():
            for row in _rows(document, f"{prefix}_{code}"):
                team = teams.get((league.id, str(row.get("team_id") or "")))
                if team is None:
                    skipped += 1
                    continue
                setattr(team, column, parse_number(row.get("balance")))
                updated[prefix] += 1

    settings_repo = LeagueSettingRepository(session)
    tax_upserts = 0
    for row in _tax_rows(document):
        year = int(parse_number(row.get("year")))
        limit = parse_number(row.get("limit"))
        if year == 0 or limit == 0:
            continue
        for league in leagues.values():
            settings_repo.upsert_luxury_tax_limit(league_id=league.id, year=year, limit=limit)
            tax_upserts += 1

    session.flush()

    result = SyncSiteSettingsResult(
        isbp_updated=updated["isbp"],
        milb_updated=updated["milb"],
        balances_skipped=skipped,
        luxury_tax_upserts=tax_upserts,
    )
    logger.info("Applied site settings: %s", result)
    return result


def sync_site_settings(
    session: Session,
    *,
    client: DashboardApiClient,
    key: str,
) -> SyncSiteSettingsResult:
    """Fetch the settings document from the remote bridge and apply it."""

    document = client.get_site_settings(key=key)
    return apply_site_settings(session, document)
