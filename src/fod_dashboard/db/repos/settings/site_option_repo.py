from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from fod_dashboard.db.models.settings.site_option import SiteOption
from fod_dashboard.db.repos.base import BaseRepository


class SiteOptionRepository(BaseRepository[SiteOption]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=SiteOption)

    def get_value(self, name: str) -> Any:
        option = self.get(name)
        return None if option is None else option.value

    def set_value(self, name: str, value: Any) -> SiteOption:
        option = self.get(name)
        if option is None:
            return self.add(SiteOption(name=name, value=value))
        option.value = value
        self.session.flush()
        return option
