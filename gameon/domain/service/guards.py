"""Role and status guards shared by game services.

Guards run inside game mutations, so the host and status they check are
always those of the copy about to be written.
"""

from gameon.domain.error import GameCancelledError, GameCompletedError, NotHostError
from gameon.domain.model.game import Game
from gameon.domain.value import GameStatus, UserId


def require_host(game: Game, user_id: UserId, action: str) -> None:
    """Raise ``NotHostError`` unless ``user_id`` currently hosts the game."""
    if not game.is_host(user_id):
        raise NotHostError(action, str(game.id), str(user_id))


def require_open(game: Game) -> None:
    """Raise if the game reached a terminal status."""
    if game.status == GameStatus.COMPLETED:
        raise GameCompletedError(str(game.id))
    if game.status == GameStatus.CANCELLED:
        raise GameCancelledError(str(game.id))
