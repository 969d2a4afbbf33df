from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from fod_dashboard.core.errors import DependencyMissing
from fod_dashboard.site_settings.fields import (
    LEAGUE_CODES,
    PAGE_FIELD_SPECS,
    PAGE_IDS_KEY,
    SETTINGS_FIELDS,
)
from fod_dashboard.site_settings.store import OptionStore

logger = logging.getLogger(__name__)

SettingsDocument = dict[str, Any]


def aggregate_site_settings(
    store: OptionStore | None,
    *,
    leagues: Sequence[str] = LEAGUE_CODES,
) -> SettingsDocument:
    """
    Build the flat site-settings document from the option store.

    Every known key is present in the result. Empty or falsy stored values are
    replaced by the field's empty container (`[]`, or `""` for page ids); values
    are otherwise passed through untouched.

    Raises DependencyMissing when the store is absent or unavailable, so callers
    never see a partial document.
    """

    if store is None or not store.is_available():
        logger.error("Site settings requested but the option store is not available")
        raise DependencyMissing("Option store is not available")

    data: SettingsDocument = {}

    for field in SETTINGS_FIELDS:
        for key in field.keys(leagues):
            data[key] = store.get_field(key) or field.empty_value()

    page_ids: dict[str, Any] = {}
    for field in PAGE_FIELD_SPECS:
        for key in field.keys(leagues):
            page_ids[key] = store.get_field(key) or field.empty_value()
    data[PAGE_IDS_KEY] = page_ids

    return data
