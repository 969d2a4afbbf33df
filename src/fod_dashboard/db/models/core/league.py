from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fod_dashboard.db.base import Base, PublicIdMixin, TimestampMixin


class League(Base, PublicIdMixin, TimestampMixin):
    __tablename__ = "leagues"

    name: Mapped[str] = mapped_column(String, nullable=False)

    teams: Mapped[list[Team]] = relationship(
        back_populates="league",
        cascade="all, delete-orphan",
        order_by="Team.row_id",
    )
    league_settings: Mapped[list[LeagueSetting]] = relationship(
        back_populates="league", cascade="all, delete-orphan"
    )


from fod_dashboard.db.models.core.league_setting import LeagueSetting  # noqa: E402
from fod_dashboard.db.models.core.team import Team  # noqa: E402
