"""Initial schema: leagues, teams, players, league settings, site options

Revision ID: 1a2f6c0d9e41
Revises:
Create Date: 2026-10-17

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "1a2f6c0d9e41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "leagues",
        sa.Column("row_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("row_id"),
        sa.UniqueConstraint("id"),
    )
    op.create_table(
        "teams",
        sa.Column("row_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("league_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("abbreviation", sa.String(), nullable=True),
        sa.Column("owner_name", sa.String(), server_default="", nullable=False),
        sa.Column("isbp_balance", sa.Numeric(12, 2), server_default="0", nullable=False),
        sa.Column("milb_balance", sa.Numeric(12, 2), server_default="0", nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["league_id"], ["leagues.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("row_id"),
        sa.UniqueConstraint("id"),
        sa.UniqueConstraint("league_id", "abbreviation", name="uq_teams_league_abbreviation"),
    )
    op.create_index("ix_teams_league_id", "teams", ["league_id"], unique=False)
    op.create_table(
        "players",
        sa.Column("row_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("team_id", sa.String(length=36), nullable=True),
        sa.Column("first_name", sa.String(), nullable=False),
        sa.Column("last_name", sa.String(), nullable=False),
        sa.Column("position", sa.String(), server_default="", nullable=False),
        sa.Column("mlb_team", sa.String(), server_default="", nullable=False),
        sa.Column("status_40_man", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("status_26_man", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("status_il", sa.String(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["team_id"], ["teams.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("row_id"),
        sa.UniqueConstraint("id"),
    )
    op.create_index("ix_players_team_id", "players", ["team_id"], unique=False)
    op.create_table(
        "league_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("league_id", sa.String(length=36), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("luxury_tax_limit", sa.Numeric(14, 2), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["league_id"], ["leagues.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("league_id", "year", name="uq_league_settings_league_year"),
    )
    op.create_table(
        "site_options",
        sa.Column("name", sa.String(length=191), nullable=False),
        sa.Column("value", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("name"),
    )


def downgrade() -> None:
    op.drop_table("site_options")
    op.drop_table("league_settings")
    op.drop_index("ix_players_team_id", table_name="players")
    op.drop_table("players")
    op.drop_index("ix_teams_league_id", table_name="teams")
    op.drop_table("teams")
    op.drop_table("leagues")
