from __future__ import annotations
from typing import Literal, Optional

from kinarow.game.session import GameSession
from kinarow.game.state import GameStatus

TimeoutAction = Literal["pass", "random"]


def handle_timeout(session: GameSession, action: TimeoutAction) -> Optional[GameStatus]:
    """
    Turn-timer expiry for the player to move.

    "pass" hands the turn over without a move and returns None; "random" plays a
    uniformly random empty cell through the normal move path.
    """
    if action == "pass":
        session.pass_turn()
        return None
    if action == "random":
        idx = session.choose_move("random")
        return session.submit_move(idx, session.current_player)
    raise ValueError(f"Unknown timeout action {action!r}.")
