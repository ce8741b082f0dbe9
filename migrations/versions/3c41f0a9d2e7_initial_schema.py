"""initial_schema

Create the foundational schema for GameOn:
- Users (profile plus denormalized rating stats)
- Games (roster lists as JSONB, optimistic version column)
- User activity (one row per user per game) with both sides of each rating
- Notifications

Revision ID: 3c41f0a9d2e7
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c41f0a9d2e7"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE game_status AS ENUM ('upcoming', 'ongoing', 'completed', 'cancelled');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("skill_level", sa.String(50), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("whatsapp", sa.String(50), nullable=True),
        sa.Column("games_played", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_ratings", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "average_rating >= 0 AND average_rating <= 5",
            name="average_rating_range",
        ),
    )
    op.create_index("idx_users_email", "users", ["email"])

    # ========================================================================
    # GAMES table (aggregate row, roster lists as JSONB)
    # ========================================================================
    op.create_table(
        "games",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("host_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("sport", sa.String(50), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("location", postgresql.JSONB(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("max_players", sa.Integer(), nullable=False),
        sa.Column("seats_left", sa.Integer(), nullable=False),
        sa.Column(
            "skill_level", sa.String(20), nullable=False, server_default="all"
        ),
        sa.Column("min_skill_level", sa.String(20), nullable=True),
        sa.Column("image", sa.Text(), nullable=False),
        sa.Column("host_whatsapp", sa.String(50), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "upcoming",
                "ongoing",
                "completed",
                "cancelled",
                name="game_status",
                create_type=False,
            ),
            nullable=False,
            server_default="upcoming",
        ),
        sa.Column(
            "registered_players",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "join_requests",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "attendance",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("completed_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("completed_by", sa.UUID(), nullable=True),
        sa.Column("cancelled_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["host_id"], ["users.id"]),
        sa.CheckConstraint("max_players >= 2", name="max_players_min"),
        sa.CheckConstraint("seats_left >= 0", name="seats_left_non_negative"),
        sa.CheckConstraint("start_time < end_time", name="start_before_end"),
    )
    op.create_index("idx_games_status_date", "games", ["status", "date"])
    op.create_index("idx_games_host_id", "games", ["host_id"])
    op.create_index("idx_games_sport", "games", ["sport"])
    # Containment lookups for "games I play in" and "games I asked to join"
    op.create_index(
        "idx_games_registered_players",
        "games",
        ["registered_players"],
        postgresql_using="gin",
        postgresql_ops={"registered_players": "jsonb_path_ops"},
    )
    op.create_index(
        "idx_games_join_requests",
        "games",
        ["join_requests"],
        postgresql_using="gin",
        postgresql_ops={"join_requests": "jsonb_path_ops"},
    )

    # ========================================================================
    # USER_ACTIVITY table (one row per user per game)
    # ========================================================================
    op.create_table(
        "user_activity",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("sport", sa.String(50), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("attended", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "rating_given", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("user_id", "game_id", name="pk_user_activity"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
    )

    # ========================================================================
    # ACTIVITY_PLAYERS_RATED table (rater side)
    # ========================================================================
    op.create_table(
        "activity_players_rated",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("rated_user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint(
            "user_id", "game_id", "rated_user_id", name="pk_activity_players_rated"
        ),
        sa.ForeignKeyConstraint(
            ["user_id", "game_id"],
            ["user_activity.user_id", "user_activity.game_id"],
            ondelete="CASCADE",
        ),
    )

    # ========================================================================
    # ACTIVITY_RATINGS_RECEIVED table (ratee side)
    # ========================================================================
    op.create_table(
        "activity_ratings_received",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("game_id", sa.UUID(), nullable=False),
        sa.Column("from_user_id", sa.UUID(), nullable=False),
        sa.Column("rating", sa.SmallInteger(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint(
            "user_id", "game_id", "from_user_id", name="pk_activity_ratings_received"
        ),
        sa.ForeignKeyConstraint(
            ["user_id", "game_id"],
            ["user_activity.user_id", "user_activity.game_id"],
            ondelete="CASCADE",
        ),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),
    )
    op.create_index(
        "idx_activity_ratings_received_user_id",
        "activity_ratings_received",
        ["user_id"],
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("game_id", sa.UUID(), nullable=True),
        sa.Column("related_user_id", sa.UUID(), nullable=True),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["game_id"], ["games.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "idx_notifications_user_created",
        "notifications",
        ["user_id", sa.text("created_at DESC")],
    )

    # Keep users.updated_at current on direct stat updates
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ language 'plpgsql';
    """)
    op.execute("""
        CREATE TRIGGER update_users_updated_at
        BEFORE UPDATE ON users
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column();
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop triggers
    op.execute("DROP TRIGGER IF EXISTS update_users_updated_at ON users")

    # Drop trigger functions
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("activity_ratings_received")
    op.drop_table("activity_players_rated")
    op.drop_table("user_activity")
    op.drop_table("games")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS game_status")
