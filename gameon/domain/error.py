"""Domain layer errors.

Every error carries an ``ErrorKind`` so callers can tell apart a missing
identity, a missing role, a missing entity, an illegal state, a lost race
and malformed input without matching on concrete classes.
"""

from gameon.domain.value import ErrorKind


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.INVALID_STATE
    code: str = "domain_error"


# ============================================================================
# KIND BASES
# ============================================================================


class UnauthorizedError(DomainError):
    """No authenticated identity was presented."""

    kind = ErrorKind.UNAUTHORIZED
    code = "unauthorized"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Identity present but lacks the role for this operation."""

    kind = ErrorKind.FORBIDDEN
    code = "forbidden"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND
    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidStateError(DomainError):
    """Operation is illegal for the game's current status."""

    kind = ErrorKind.INVALID_STATE
    code = "invalid_state"


class ConflictError(DomainError):
    """A concurrency-sensitive invariant would be violated."""

    kind = ErrorKind.CONFLICT
    code = "conflict"


class ValidationError(DomainError):
    """Domain validation error (malformed input)."""

    kind = ErrorKind.VALIDATION
    code = "validation_error"


# ============================================================================
# ROSTER
# ============================================================================


class NotHostError(ForbiddenError):
    """Raised when a non-host attempts a host-only operation."""

    code = "not_host"

    def __init__(self, action: str, game_id: str, user_id: str):
        self.game_id = game_id
        self.user_id = user_id
        super().__init__(f"Only the host can {action} (game {game_id}, user {user_id})")


class AlreadyMemberError(ConflictError):
    """User is already a participant or has a pending request."""

    code = "already_member"

    def __init__(self, game_id: str, user_id: str, reason: str):
        self.game_id = game_id
        self.user_id = user_id
        super().__init__(f"User {user_id} {reason} for game {game_id}")


class GameFullError(InvalidStateError):
    """No seats are left in the game."""

    code = "game_full"

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} is full")


class SeatTakenError(GameFullError, ConflictError):
    """The last seat was claimed by a concurrent accept."""

    kind = ErrorKind.CONFLICT
    code = "seat_taken"

    def __init__(self, game_id: str):
        super().__init__(game_id)
        self.args = (f"Seat already filled in game {game_id}",)


class GameNotJoinableError(InvalidStateError):
    """The game is not accepting join requests."""

    code = "game_not_joinable"

    def __init__(self, game_id: str, status: str):
        self.game_id = game_id
        self.status = status
        super().__init__(f"Cannot join game {game_id} with status {status}")


class RequestNotFoundError(NotFoundError):
    """Join request is not pending on the game."""

    code = "request_not_found"

    def __init__(self, request_id: str):
        super().__init__("Join request", request_id)


class NotParticipantError(NotFoundError):
    """User is not (or never was) a party to the game."""

    code = "not_participant"

    def __init__(self, game_id: str, user_id: str):
        self.game_id = game_id
        self.user_id = user_id
        super().__init__("Participant", f"{user_id} in game {game_id}")


class LastHostWithPlayersError(InvalidStateError):
    """Host tried to leave while participants remain."""

    code = "last_host_with_players"

    def __init__(self, game_id: str, remaining: int):
        self.game_id = game_id
        self.remaining = remaining
        super().__init__(
            f"Host cannot leave game {game_id} while {remaining} player(s) remain; "
            "transfer host first"
        )


# ============================================================================
# LIFECYCLE
# ============================================================================


class InvalidTransitionError(InvalidStateError):
    """Status change not permitted by the lifecycle."""

    code = "invalid_transition"

    def __init__(self, game_id: str, from_status: str, to_status: str):
        self.game_id = game_id
        super().__init__(
            f"Game {game_id} cannot move from {from_status} to {to_status}"
        )


class GameCompletedError(InvalidStateError):
    """Operation is illegal once the game is completed."""

    code = "game_completed"

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} is already completed")


class GameCancelledError(InvalidStateError):
    """Operation is illegal on a cancelled game."""

    code = "game_cancelled"

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} is cancelled")


class AttendanceNotOpenError(InvalidStateError):
    """Attendance marked before the game has started."""

    code = "attendance_not_open"

    def __init__(self, game_id: str, starts_at: str):
        self.game_id = game_id
        self.starts_at = starts_at
        super().__init__(
            f"Attendance for game {game_id} opens at its start time ({starts_at})"
        )


class GameNotCompletedError(InvalidStateError):
    """Operation requires a completed game."""

    code = "game_not_completed"

    def __init__(self, game_id: str, status: str):
        self.game_id = game_id
        self.status = status
        super().__init__(
            f"Can only rate players in completed games. Current status: {status}"
        )


class StaleGameError(ConflictError):
    """Conditional write lost to a concurrent writer."""

    code = "stale_game"

    def __init__(self, game_id: str, expected_version: int):
        self.game_id = game_id
        self.expected_version = expected_version
        super().__init__(
            f"Game {game_id} changed concurrently (expected version {expected_version})"
        )


# ============================================================================
# RATINGS
# ============================================================================


class SelfRatingError(ValidationError):
    """Users cannot rate themselves."""

    code = "self_rating"

    def __init__(self):
        super().__init__("You cannot rate yourself")


class DuplicateRatingError(ConflictError):
    """A rating already exists for this (game, rater, ratee)."""

    code = "duplicate_rating"

    def __init__(self, game_id: str, rater_id: str, ratee_id: str):
        self.game_id = game_id
        self.rater_id = rater_id
        self.ratee_id = ratee_id
        super().__init__(
            "You have already rated this player for this game. "
            "You can only rate each player once per game."
        )
