from __future__ import annotations

import time
from typing import Optional

from kinarow.config import AI_THINK_DELAY_SEC
from kinarow.game.scoreboard import Scoreboard
from kinarow.game.session import GameSession
from kinarow.game.timeout import TimeoutAction, handle_timeout
from kinarow.types import Player, other
from kinarow.ui.prompts import ask_yes_no, parse_move, timed_input
from kinarow.ui.render import render


def next_start_player(previous: Player, swap: bool) -> Player:
    """Starting player for a rematch."""
    return other(previous) if swap else previous


def _header(session: GameSession, scoreboard: Scoreboard) -> str:
    if session.vs_computer:
        cpu = session.computer_player
        mode = f"You: {other(cpu)} | Computer ({session.tier}): {cpu}"
    else:
        mode = "Local: X vs O"
    return f"{mode} | {scoreboard.summary()}"


def _status_line(session: GameSession, last: str) -> str:
    if session.status.is_over:
        return session.status.describe()
    turn = f"Player {session.current_player}'s turn."
    return f"{last} | {turn}" if last else turn


def _computer_turn(session: GameSession, think_delay: float) -> str:
    if think_delay > 0:
        time.sleep(think_delay)
    player = session.current_player
    idx = session.choose_move()
    session.submit_move(idx, player)

    info = session.last_info
    if info.get("nodes"):
        return (
            f"Computer chose {idx + 1} | d={info.get('depth')} | nodes={info.get('nodes')} | "
            f"cut={info.get('cutoffs')} | eval={info.get('eval')} | {info.get('time_ms')}ms"
        )
    return f"Computer chose {idx + 1}"


def play_one(
    session: GameSession,
    scoreboard: Scoreboard,
    timeout_sec: float = 0,
    timeout_action: TimeoutAction = "pass",
    think_delay: float = AI_THINK_DELAY_SEC,
) -> bool:
    """Run one game to its end. Returns False if the player quit."""
    last = ""

    while True:
        status = session.status
        render(
            session.board,
            session.size,
            _status_line(session, last),
            highlight=status.line,
            footer=_header(session, scoreboard),
        )
        if status.is_over:
            return True

        if session.is_computer_turn():
            last = _computer_turn(session, think_delay)
            continue

        raw: Optional[str] = timed_input(f"Player {session.current_player} move: ", timeout_sec)
        if raw is None:
            who = session.current_player
            handle_timeout(session, timeout_action)
            last = f"Player {who} ran out of time ({timeout_action})."
            continue

        try:
            cmd = parse_move(raw, session.size * session.size)
            if cmd == "quit":
                return False
            if cmd == "undo":
                last = "Move undone." if session.undo() else "Nothing to undo."
                continue

            player = session.current_player
            session.submit_move(cmd, player)
            last = f"Player {player} chose {cmd + 1}"

        except ValueError as e:
            last = str(e)


def run_game(
    session: GameSession,
    scoreboard: Optional[Scoreboard] = None,
    timeout_sec: float = 0,
    timeout_action: TimeoutAction = "pass",
    swap_start: bool = False,
    think_delay: float = AI_THINK_DELAY_SEC,
) -> Scoreboard:
    scoreboard = scoreboard or Scoreboard().attach(session)

    while True:
        if not play_one(session, scoreboard, timeout_sec, timeout_action, think_delay):
            break
        if not ask_yes_no("Rematch?"):
            break
        session.reset(next_start_player(session.start_player, swap_start))

    print(scoreboard.summary())
    return scoreboard
