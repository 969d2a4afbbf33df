from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

# CMS suffixes for the four leagues, in display order.
LEAGUE_CODES: tuple[str, ...] = ("mlb", "aaa", "aa", "high_a")

PAGE_IDS_KEY = "page_ids"

PAGE_FIELDS: tuple[str, ...] = (
    "trade_page",
    "free_agent_page",
    "view_pending_trades_page",
    "roster_page",
    "waiver_wire_page",
    "league_rosters_page",
    "registration_page",
)


class DefaultKind(str, Enum):
    LIST = "list"
    STRING = "string"


@dataclass(frozen=True)
class FieldSpec:
    """
    One settings-document entry.

    `key_template` may contain `{league}`; such a field expands to one key per
    league code, in league order.
    """

    key_template: str
    default: DefaultKind = DefaultKind.LIST

    @property
    def per_league(self) -> bool:
        return "{league}" in self.key_template

    def keys(self, leagues: Sequence[str] = LEAGUE_CODES) -> list[str]:
        if not self.per_league:
            return [self.key_template]
        return [self.key_template.format(league=lg) for lg in leagues]

    def empty_value(self) -> Any:
        if self.default is DefaultKind.STRING:
            return ""
        return []


SETTINGS_FIELDS: tuple[FieldSpec, ...] = (
    # ISBP / MILB balances
    FieldSpec("isbp_{league}"),
    FieldSpec("milb_{league}"),
    FieldSpec("luxury_tax_thresholds"),
    # dead cap overrides, etc.
    FieldSpec("manual_team_financials"),
    FieldSpec("extension_usage_log"),
    FieldSpec("restructure_usage_log"),
    # league key dates
    FieldSpec("dates_{league}"),
    FieldSpec("trade_deadlines"),
    FieldSpec("opening_days"),
    FieldSpec("league_slack_channels"),
)

PAGE_FIELD_SPECS: tuple[FieldSpec, ...] = tuple(
    FieldSpec(name, default=DefaultKind.STRING) for name in PAGE_FIELDS
)


def known_keys(leagues: Sequence[str] = LEAGUE_CODES) -> list[str]:
    """Top-level keys of a settings document, in output order."""

    keys: list[str] = []
    for field in SETTINGS_FIELDS:
        keys.extend(field.keys(leagues))
    keys.append(PAGE_IDS_KEY)
    return keys
