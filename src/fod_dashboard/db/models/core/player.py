from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Index, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fod_dashboard.db.base import Base, PublicIdMixin, TimestampMixin

STATUS_ACTIVE_26 = "Active (26-Man)"
STATUS_40_MAN_MINORS = "40-Man (Minors)"
STATUS_MINORS = "Minors (Non-40)"


class Player(Base, PublicIdMixin, TimestampMixin):
    __tablename__ = "players"

    # free agents have no team
    team_id: Mapped[str | None] = mapped_column(
        ForeignKey("teams.id", ondelete="SET NULL"), nullable=True
    )

    first_name: Mapped[str] = mapped_column(String, nullable=False)
    last_name: Mapped[str] = mapped_column(String, nullable=False)
    position: Mapped[str] = mapped_column(String, nullable=False, default="", server_default="")
    mlb_team: Mapped[str] = mapped_column(String, nullable=False, default="", server_default="")

    status_40_man: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    status_26_man: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    status_il: Mapped[str | None] = mapped_column(String, nullable=True)

    team: Mapped[Team | None] = relationship(back_populates="players")

    __table_args__ = (Index("ix_players_team_id", "team_id"),)

    @property
    def status(self) -> str:
        if self.status_il:
            return self.status_il
        if self.status_26_man:
            return STATUS_ACTIVE_26
        if self.status_40_man:
            return STATUS_40_MAN_MINORS
        return STATUS_MINORS


from fod_dashboard.db.models.core.team import Team  # noqa: E402
