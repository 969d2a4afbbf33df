"""Site-settings bridge: the CMS option snapshot, behind a shared secret."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from fod_dashboard.api.auth import SecretVerifier
from fod_dashboard.api.deps import get_option_store, get_secret_verifier
from fod_dashboard.site_settings.aggregator import aggregate_site_settings
from fod_dashboard.site_settings.store import OptionStore

router = APIRouter(prefix="/fod-bridge/v1", tags=["site-settings"])


@router.get("/site-settings")
def site_settings(
    key: str | None = Query(default=None, description="Shared bridge secret."),
    verifier: SecretVerifier = Depends(get_secret_verifier),
    store: OptionStore = Depends(get_option_store),
) -> dict[str, Any]:
    verifier.verify(key)
    return aggregate_site_settings(store)
