from __future__ import annotations

import pytest
import sqlalchemy as sa
from sqlalchemy.orm import Session

import fod_dashboard.db.models  # noqa: F401
from fod_dashboard.core.errors import DependencyMissing
from fod_dashboard.db.base import Base
from fod_dashboard.db.repos.settings.site_option_repo import SiteOptionRepository
from fod_dashboard.site_settings.aggregator import aggregate_site_settings
from fod_dashboard.site_settings.fields import PAGE_FIELDS, PAGE_IDS_KEY, FieldSpec, known_keys
from fod_dashboard.site_settings.store import SqlOptionStore


def _make_session(*, create_tables: bool = True) -> Session:
    engine = sa.create_engine("sqlite+pysqlite:///:memory:", future=True)
    if create_tables:
        Base.metadata.create_all(engine)
    return Session(engine)


def test_every_known_key_is_present_on_an_empty_store() -> None:
    session = _make_session()

    doc = aggregate_site_settings(SqlOptionStore(session))

    assert list(doc.keys()) == known_keys()
    for key in known_keys():
        assert doc[key] is not None

    assert doc["isbp_mlb"] == []
    assert doc["dates_high_a"] == []
    assert doc[PAGE_IDS_KEY] == {f: "" for f in PAGE_FIELDS}


def test_only_luxury_tax_populated() -> None:
    session = _make_session()
    SiteOptionRepository(session).set_value("luxury_tax_thresholds", {"2026": 250000000})
    session.commit()

    doc = aggregate_site_settings(SqlOptionStore(session))

    assert doc["luxury_tax_thresholds"] == {"2026": 250000000}
    for key in known_keys():
        if key in ("luxury_tax_thresholds", PAGE_IDS_KEY):
            continue
        assert doc[key] == []
    assert all(v == "" for v in doc[PAGE_IDS_KEY].values())


def test_stored_values_pass_through_and_falsy_values_default() -> None:
    session = _make_session()
    repo = SiteOptionRepository(session)
    balances = [{"team_id": "NYY", "balance": "1,250,000"}]
    repo.set_value("isbp_aaa", balances)
    repo.set_value("milb_aa", "")
    repo.set_value("opening_days", 0)
    repo.set_value("trade_page", 42)
    repo.set_value("roster_page", None)
    session.commit()

    doc = aggregate_site_settings(SqlOptionStore(session))

    assert doc["isbp_aaa"] == balances
    assert doc["milb_aa"] == []
    assert doc["opening_days"] == []
    assert doc[PAGE_IDS_KEY]["trade_page"] == 42
    assert doc[PAGE_IDS_KEY]["roster_page"] == ""


def test_missing_option_table_fails_the_whole_call() -> None:
    session = _make_session(create_tables=False)

    with pytest.raises(DependencyMissing):
        aggregate_site_settings(SqlOptionStore(session))


def test_absent_store_fails_the_whole_call() -> None:
    with pytest.raises(DependencyMissing):
        aggregate_site_settings(None)


def test_field_spec_expands_per_league_in_order() -> None:
    field = FieldSpec("isbp_{league}")

    assert field.per_league
    assert field.keys() == ["isbp_mlb", "isbp_aaa", "isbp_aa", "isbp_high_a"]
    assert FieldSpec("trade_deadlines").keys() == ["trade_deadlines"]


def test_known_keys_follow_league_list() -> None:
    keys = known_keys(["mlb", "rookie"])

    assert "isbp_rookie" in keys
    assert "dates_rookie" in keys
    assert "isbp_aaa" not in keys
    assert keys[-1] == PAGE_IDS_KEY
