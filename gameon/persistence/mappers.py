"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Roster lists are
stored as JSONB and round-trip through ``model_dump(mode="json")``.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from gameon.domain.model import (
    ActivityEntry,
    AttendanceRecord,
    Game,
    JoinRequest,
    Notification,
    Participant,
    RatingReceived,
    User,
)
from gameon.domain.value import (
    GameId,
    GameStatus,
    Location,
    NotificationId,
    NotificationType,
    SkillLevel,
    Sport,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_game(row: Dict[str, Any]) -> Game:
    """Convert database row to Game domain model.

    Args:
        row: Database row as dict

    Returns:
        Game domain model
    """
    return Game(
        id=GameId(_uuid(row["id"])),
        host_id=UserId(_uuid(row["host_id"])),
        title=row["title"],
        sport=Sport(row["sport"]),
        description=row["description"],
        location=Location.model_validate(row["location"]),
        date=row["date"],
        start_time=row["start_time"],
        end_time=row["end_time"],
        max_players=row["max_players"],
        skill_level=SkillLevel(row["skill_level"]),
        min_skill_level=(
            SkillLevel(row["min_skill_level"]) if row.get("min_skill_level") else None
        ),
        image=row["image"],
        host_whatsapp=row.get("host_whatsapp"),
        status=GameStatus(row["status"]),
        registered_players=[
            Participant.model_validate(p) for p in row["registered_players"]
        ],
        join_requests=[JoinRequest.model_validate(r) for r in row["join_requests"]],
        attendance=[AttendanceRecord.model_validate(a) for a in row["attendance"]],
        completed_at=row.get("completed_at"),
        completed_by=(
            UserId(_uuid(row["completed_by"])) if row.get("completed_by") else None
        ),
        cancelled_at=row.get("cancelled_at"),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def game_to_dict(game: Game) -> Dict[str, Any]:
    """Convert Game domain model to database dict.

    Args:
        game: Game domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": game.id,
        "host_id": game.host_id,
        "title": game.title,
        "sport": game.sport.root,
        "description": game.description,
        "location": game.location.model_dump(mode="json"),
        "date": game.date,
        "start_time": game.start_time,
        "end_time": game.end_time,
        "max_players": game.max_players,
        "seats_left": game.seats_left,
        "skill_level": game.skill_level.value,
        "min_skill_level": (
            game.min_skill_level.value if game.min_skill_level else None
        ),
        "image": game.image,
        "host_whatsapp": game.host_whatsapp,
        "status": game.status.value,
        "registered_players": [
            p.model_dump(mode="json") for p in game.registered_players
        ],
        "join_requests": [r.model_dump(mode="json") for r in game.join_requests],
        "attendance": [a.model_dump(mode="json") for a in game.attendance],
        "completed_at": game.completed_at,
        "completed_by": game.completed_by,
        "cancelled_at": game.cancelled_at,
        "version": game.version,
        "created_at": game.created_at,
        "updated_at": game.updated_at,
    }


def row_to_activity_entry(
    row: Dict[str, Any],
    players_rated: Iterable[UUID] = (),
    ratings_received: Iterable[Dict[str, Any]] = (),
) -> ActivityEntry:
    """Convert a ``user_activity`` row plus its rating rows to an ActivityEntry."""
    return ActivityEntry(
        game_id=GameId(_uuid(row["game_id"])),
        sport=Sport(row["sport"]),
        date=row["date"],
        attended=row["attended"],
        rating_given=row["rating_given"],
        players_rated=[UserId(_uuid(uid)) for uid in players_rated],
        ratings_received=[
            RatingReceived(
                from_user_id=UserId(_uuid(r["from_user_id"])),
                rating=r["rating"],
                comment=r["comment"],
                created_at=r["created_at"],
            )
            for r in ratings_received
        ],
    )


def row_to_user(
    row: Dict[str, Any], activity_history: Iterable[ActivityEntry] = ()
) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        activity_history: Entries assembled from the activity tables

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row.get("email"),
        image=row.get("image"),
        skill_level=row.get("skill_level"),
        age=row.get("age"),
        whatsapp=row.get("whatsapp"),
        games_played=row["games_played"],
        average_rating=row["average_rating"],
        total_ratings=row["total_ratings"],
        activity_history=list(activity_history),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to a ``users`` row (without activity)."""
    return user.model_dump(exclude={"activity_history"})


def activity_entry_to_dict(user_id: UserId, entry: ActivityEntry) -> Dict[str, Any]:
    """Convert an ActivityEntry to a ``user_activity`` row."""
    return {
        "user_id": user_id,
        "game_id": entry.game_id,
        "sport": entry.sport.root,
        "date": entry.date,
        "attended": entry.attended,
        "rating_given": entry.rating_given,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        game_id=GameId(_uuid(row["game_id"])) if row.get("game_id") else None,
        related_user_id=(
            UserId(_uuid(row["related_user_id"]))
            if row.get("related_user_id")
            else None
        ),
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
