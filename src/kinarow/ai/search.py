from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from kinarow.ai.base import Agent
from kinarow.ai.greedy_agent import GreedyAgent
from kinarow.ai.minimax_agent import MinimaxAgent
from kinarow.ai.random_agent import RandomAgent
from kinarow.core.board import Board
from kinarow.errors import ConfigurationError, NoLegalMoveError
from kinarow.types import TIERS, Line, Player, Tier

log = logging.getLogger(__name__)


def make_agent(tier: Tier, rng: Optional[random.Random] = None) -> Agent:
    rng = rng if rng is not None else random.Random()
    if tier == "random":
        return RandomAgent(rng=rng)
    if tier == "greedy":
        return GreedyAgent(rng=rng)
    if tier == "minimax":
        return MinimaxAgent()
    raise ConfigurationError(f"Unknown tier {tier!r}; expected one of {', '.join(TIERS)}.")


def choose_move(
    board: Board,
    lines: Sequence[Line],
    ai_player: Player,
    tier: Tier,
    rng: Optional[random.Random] = None,
    agent: Optional[Agent] = None,
) -> int:
    """
    Pick a move for `ai_player`.

    The search runs on a private copy, so `board` is never seen half-mutated.
    Pass `agent` to reuse one (and read its `last_info` afterwards).
    """
    if board.is_full():
        raise NoLegalMoveError("Board is full.")

    if agent is None:
        agent = make_agent(tier, rng)

    move = agent.choose_move(board.copy(), lines, ai_player)
    log.debug("%s chose %d for %s: %s", agent.name, move, ai_player, agent.last_info)
    return move
