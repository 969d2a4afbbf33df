from __future__ import annotations

import logging
from typing import Any, Protocol

import sqlalchemy as sa
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fod_dashboard.db.models.settings.site_option import SiteOption
from fod_dashboard.db.repos.settings.site_option_repo import SiteOptionRepository

logger = logging.getLogger(__name__)


class OptionStore(Protocol):
    """Read access to named CMS option values."""

    def is_available(self) -> bool: ...

    def get_field(self, name: str) -> Any: ...


class SqlOptionStore:
    """Option store backed by the `site_options` table."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.repo = SiteOptionRepository(session)

    def is_available(self) -> bool:
        bind = self.session.get_bind()
        try:
            return sa.inspect(bind).has_table(SiteOption.__tablename__)
        except SQLAlchemyError:
            logger.exception("Option store database is unreachable")
            return False

    def get_field(self, name: str) -> Any:
        return self.repo.get_value(name)
