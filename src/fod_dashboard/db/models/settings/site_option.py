from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from fod_dashboard.db.base import Base, TimestampMixin


class SiteOption(Base, TimestampMixin):
    """One named CMS option value (e.g. `isbp_mlb`, `trade_page`), stored as opaque JSON."""

    __tablename__ = "site_options"

    name: Mapped[str] = mapped_column(String(191), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
