from __future__ import annotations

from decimal import Decimal

from sqlalchemy import ForeignKey, Index, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fod_dashboard.db.base import Base, PublicIdMixin, TimestampMixin


class Team(Base, PublicIdMixin, TimestampMixin):
    __tablename__ = "teams"

    league_id: Mapped[str] = mapped_column(
        ForeignKey("leagues.id", ondelete="CASCADE"), nullable=False
    )

    name: Mapped[str] = mapped_column(String, nullable=False)
    abbreviation: Mapped[str | None] = mapped_column(String, nullable=True)
    owner_name: Mapped[str] = mapped_column(String, nullable=False, default="", server_default="")

    isbp_balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0"), server_default="0"
    )
    milb_balance: Mapped[Decimal] = mapped_column(
        Numeric(12, 2), nullable=False, default=Decimal("0"), server_default="0"
    )

    league: Mapped[League] = relationship(back_populates="teams")

    players: Mapped[list[Player]] = relationship(
        back_populates="team",
        order_by="Player.row_id",
    )

    __table_args__ = (
        UniqueConstraint("league_id", "abbreviation", name="uq_teams_league_abbreviation"),
        Index("ix_teams_league_id", "league_id"),
    )


from fod_dashboard.db.models.core.league import League  # noqa: E402
from fod_dashboard.db.models.core.player import Player  # noqa: E402
