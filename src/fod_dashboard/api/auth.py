from __future__ import annotations

import hmac
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fod_dashboard.core.config import Settings
from fod_dashboard.core.errors import Unauthorized

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SecretVerifier:
    """
    Shared-secret check for the site-settings bridge.

    Accepts the current secret or any previous one (rotation window). With no
    secrets configured every request is rejected.
    """

    secrets: tuple[str, ...] = ()

    @classmethod
    def from_secrets(cls, secrets: Iterable[str | None]) -> SecretVerifier:
        return cls(tuple(s for s in secrets if s))

    @classmethod
    def from_settings(cls, s: Settings) -> SecretVerifier:
        return cls.from_secrets([s.bridge_secret, *s.bridge_previous_secrets])

    def matches(self, presented: str | None) -> bool:
        if not presented:
            return False
        candidate = presented.encode("utf-8")
        matched = False
        # compare against every secret so timing does not reveal which one matched
        for secret in self.secrets:
            matched |= hmac.compare_digest(candidate, secret.encode("utf-8"))
        return matched

    def verify(self, presented: str | None) -> None:
        if not self.secrets:
            logger.warning("Site settings requested but no bridge secret is configured")
            raise Unauthorized("Bridge secret is not configured")
        if not self.matches(presented):
            logger.warning("Rejected site settings request with a missing or invalid key")
            raise Unauthorized("Invalid key")
