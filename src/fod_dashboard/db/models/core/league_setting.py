from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, Numeric, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fod_dashboard.db.base import Base, TimestampMixin


class LeagueSetting(Base, TimestampMixin):
    __tablename__ = "league_settings"

    id: Mapped[int] = mapped_column(primary_key=True)

    league_id: Mapped[str] = mapped_column(
        ForeignKey("leagues.id", ondelete="CASCADE"), nullable=False
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    luxury_tax_limit: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)

    league: Mapped[League] = relationship(back_populates="league_settings")

    __table_args__ = (
        UniqueConstraint("league_id", "year", name="uq_league_settings_league_year"),
    )


from fod_dashboard.db.models.core.league import League  # noqa: E402
