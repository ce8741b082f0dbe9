"""SQLAlchemy table definitions for GameOn.

They match the schema defined in Alembic migrations. A game keeps its
roster lists (players, join requests, attendance) as JSONB on the game row
so one version-checked UPDATE replaces the whole aggregate. Per-user
activity is relational so each rating step can be a conditional INSERT.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Float,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
    Time,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

GAME_STATUS_ENUM = postgresql.ENUM(
    "upcoming",
    "ongoing",
    "completed",
    "cancelled",
    name="game_status",
    create_type=False,
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(100), nullable=False),
    Column("email", String(255), nullable=True),
    Column("image", Text, nullable=True),
    Column("skill_level", String(50), nullable=True),
    Column("age", Integer, nullable=True),
    Column("whatsapp", String(50), nullable=True),
    Column("games_played", Integer, nullable=False, server_default="0"),
    Column("average_rating", Float, nullable=False, server_default="0"),
    Column("total_ratings", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "average_rating >= 0 AND average_rating <= 5", name="average_rating_range"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# GAMES TABLE
# ============================================================================
games_table = Table(
    "games",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("host_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("title", String(200), nullable=False),
    Column("sport", String(50), nullable=False),
    Column("description", Text, nullable=False),
    Column("location", JSONB, nullable=False),
    Column("date", Date, nullable=False),
    Column("start_time", Time, nullable=False),
    Column("end_time", Time, nullable=False),
    Column("max_players", Integer, nullable=False),
    Column("seats_left", Integer, nullable=False),  # Denormalized for the CHECK
    Column("skill_level", String(20), nullable=False, server_default="all"),
    Column("min_skill_level", String(20), nullable=True),
    Column("image", Text, nullable=False),
    Column("host_whatsapp", String(50), nullable=True),
    Column("status", GAME_STATUS_ENUM, nullable=False, server_default="upcoming"),
    Column("registered_players", JSONB, nullable=False, server_default="[]"),
    Column("join_requests", JSONB, nullable=False, server_default="[]"),
    Column("attendance", JSONB, nullable=False, server_default="[]"),
    Column("completed_at", TIMESTAMP(timezone=True), nullable=True),
    Column("completed_by", UUID, nullable=True),
    Column("cancelled_at", TIMESTAMP(timezone=True), nullable=True),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("max_players >= 2", name="max_players_min"),
    CheckConstraint("seats_left >= 0", name="seats_left_non_negative"),
    CheckConstraint("start_time < end_time", name="start_before_end"),
)

Index("idx_games_status_date", games_table.c.status, games_table.c.date)
Index("idx_games_host_id", games_table.c.host_id)
Index("idx_games_sport", games_table.c.sport)
# GIN indexes on the JSONB roster lists are created in the migration

# ============================================================================
# USER_ACTIVITY TABLE (one row per user per game)
# ============================================================================
user_activity_table = Table(
    "user_activity",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=False),
    Column("sport", String(50), nullable=False),
    Column("date", Date, nullable=False),
    Column("attended", Boolean, nullable=False, server_default="true"),
    Column("rating_given", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "game_id", name="pk_user_activity"),
)

# ============================================================================
# ACTIVITY_PLAYERS_RATED TABLE (rater side of a rating)
# ============================================================================
activity_players_rated_table = Table(
    "activity_players_rated",
    metadata,
    Column("user_id", UUID, nullable=False),
    Column("game_id", UUID, nullable=False),
    Column("rated_user_id", UUID, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint(
        "user_id", "game_id", "rated_user_id", name="pk_activity_players_rated"
    ),
    ForeignKeyConstraint(
        ["user_id", "game_id"],
        ["user_activity.user_id", "user_activity.game_id"],
        ondelete="CASCADE",
    ),
)

# ============================================================================
# ACTIVITY_RATINGS_RECEIVED TABLE (ratee side of a rating)
# ============================================================================
activity_ratings_received_table = Table(
    "activity_ratings_received",
    metadata,
    Column("user_id", UUID, nullable=False),
    Column("game_id", UUID, nullable=False),
    Column("from_user_id", UUID, nullable=False),
    Column("rating", SmallInteger, nullable=False),
    Column("comment", Text, nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint(
        "user_id", "game_id", "from_user_id", name="pk_activity_ratings_received"
    ),
    ForeignKeyConstraint(
        ["user_id", "game_id"],
        ["user_activity.user_id", "user_activity.game_id"],
        ondelete="CASCADE",
    ),
    CheckConstraint("rating >= 1 AND rating <= 5", name="rating_range"),
)

Index(
    "idx_activity_ratings_received_user_id",
    activity_ratings_received_table.c.user_id,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", String(50), nullable=False),
    Column("title", String(200), nullable=False),
    Column("message", Text, nullable=False),
    Column("game_id", UUID, ForeignKey("games.id", ondelete="CASCADE"), nullable=True),
    Column("related_user_id", UUID, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)
