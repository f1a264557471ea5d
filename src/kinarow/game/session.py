# src/kinarow/game/session.py

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

from kinarow.ai.search import choose_move as search_move, make_agent
from kinarow.config import DEFAULT_SIZE, win_length_for
from kinarow.core.board import Board
from kinarow.core.lines import generate_lines
from kinarow.core.rules import find_win
from kinarow.errors import ConfigurationError, IllegalMoveError, NoLegalMoveError
from kinarow.game.events import ContinueEvent, DrawEvent, GameEvent, Listener, WinEvent
from kinarow.game.state import DRAWN, IN_PROGRESS, GameStatus, won
from kinarow.types import TIERS, Cell, Line, Move, Player, Tier, other

log = logging.getLogger(__name__)


class GameSession:
    """
    Owner of one game: board, move history, whose turn it is, and the status.

    Every change goes through submit_move / undo / reset / pass_turn. Listeners
    added with subscribe() receive a WinEvent, DrawEvent or ContinueEvent after
    each accepted move; the session never schedules a computer turn itself.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        win_length: Optional[int] = None,
        start_player: Player = "X",
        computer_player: Optional[Player] = None,
        tier: Tier = "minimax",
        rng: Optional[random.Random] = None,
    ) -> None:
        if win_length is None:
            win_length = win_length_for(size)
        if size <= 0 or win_length <= 0 or win_length > size:
            raise ConfigurationError(f"Invalid board: size={size}, win_length={win_length}.")
        if start_player not in ("X", "O"):
            raise ConfigurationError(f"Unknown start player {start_player!r}.")
        if computer_player not in (None, "X", "O"):
            raise ConfigurationError(f"Unknown computer player {computer_player!r}.")
        if tier not in TIERS:
            raise ConfigurationError(f"Unknown tier {tier!r}; expected one of {', '.join(TIERS)}.")

        self.size = size
        self.win_length = win_length
        self.lines: Tuple[Line, ...] = generate_lines(size, win_length)
        self.start_player: Player = start_player
        self.computer_player = computer_player
        self.tier: Tier = tier
        self.rng = rng if rng is not None else random.Random()

        self._board = Board(size)
        self._history: List[Move] = []
        self._current: Player = start_player
        self._status: GameStatus = IN_PROGRESS
        self._listeners: List[Listener] = []
        self._busy = False

        # Search stats from the most recent choose_move()
        self.last_info: dict = {}

    # ---- read-only snapshots ----

    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._board.cells)

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(self._history)

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def vs_computer(self) -> bool:
        return self.computer_player is not None

    def is_computer_turn(self) -> bool:
        return self.computer_player == self._current and not self._status.is_over

    # ---- events ----

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ---- mutations ----

    def submit_move(self, index: int, player: Player) -> GameStatus:
        if self._busy:
            raise IllegalMoveError("Engine is busy choosing a move.")
        if self._status.is_over:
            raise IllegalMoveError(f"Game is over: {self._status.describe()}")
        if player != self._current:
            raise IllegalMoveError(f"It is player {self._current}'s turn, not {player}'s.")
        if not self._board.apply(index, player):
            if not self._board.in_range(index):
                raise IllegalMoveError(f"Cell {index} is off the board.")
            raise IllegalMoveError(f"Cell {index} is already taken.")

        move = Move(index, player)
        self._history.append(move)
        log.debug("move %s (%d/%d)", move, len(self._history), len(self._board))

        win = find_win(self._board, self.lines)
        if win is not None:
            self._status = won(win.player, win.line)
            self._emit(WinEvent(move, win.player, win.line))
        elif self._board.is_full():
            self._status = DRAWN
            self._emit(DrawEvent(move))
        else:
            self._current = other(player)
            self._emit(ContinueEvent(move, self._current))

        return self._status

    def undo(self) -> bool:
        """
        Take back the last move. Against the computer, keep taking moves back
        until a human move has been removed, so the human is to move again
        (normally two plies, more after a passed turn). Returns False (nothing
        changed) when there are not enough moves to take back.
        """
        if self._busy:
            return False

        plies = self._plies_to_undo()
        if plies == 0:
            return False

        for _ in range(plies):
            last = self._history.pop()
            self._board.revert(last.index)
            self._current = last.player

        self._status = IN_PROGRESS
        log.debug("undo %d ply; %s to move", plies, self._current)
        return True

    def _plies_to_undo(self) -> int:
        if not self.vs_computer:
            return 1 if self._history else 0

        # one move alone is never taken back against the computer
        if len(self._history) < 2:
            return 0
        human = other(self.computer_player)
        for plies, move in enumerate(reversed(self._history), start=1):
            if move.player == human:
                return plies
        return 0

    def reset(self, start_player: Optional[Player] = None) -> None:
        if start_player is not None:
            if start_player not in ("X", "O"):
                raise ConfigurationError(f"Unknown start player {start_player!r}.")
            self.start_player = start_player

        self._current = self.start_player
        self._board = Board(self.size)
        self._history.clear()
        self._status = IN_PROGRESS
        self._busy = False
        log.debug("reset; %s starts", self._current)

    def pass_turn(self) -> Player:
        """Hand the turn to the other player without a move (timed-turn expiry)."""
        if self._busy:
            raise IllegalMoveError("Engine is busy choosing a move.")
        if self._status.is_over:
            raise IllegalMoveError(f"Game is over: {self._status.describe()}")
        self._current = other(self._current)
        return self._current

    # ---- computer player ----

    def choose_move(self, tier: Optional[Tier] = None) -> int:
        """
        Search a move for the player to move. Nothing is applied: the caller
        submits the returned index through submit_move().
        """
        if self._status.is_over:
            raise IllegalMoveError(f"Game is over: {self._status.describe()}")
        if self._board.is_full():
            raise NoLegalMoveError("Board is full.")

        tier = tier or self.tier
        agent = make_agent(tier, self.rng)
        self._busy = True
        try:
            move = search_move(self._board, self.lines, self._current, tier, agent=agent)
        finally:
            self._busy = False

        self.last_info = dict(agent.last_info)
        return move

    def replay(self) -> Board:
        """Rebuild a board from the history alone."""
        b = Board(self.size)
        for m in self._history:
            b.apply(m.index, m.player)
        return b
