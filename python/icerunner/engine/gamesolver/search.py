"""Generic breadth-first search over a puzzle's state graph."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Hashable, Iterable, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Hashable)
M = TypeVar("M")


def breadth_first_search(
    start: S,
    is_goal: Callable[[S], bool],
    successors: Callable[[S], Iterable[tuple[M, S]]],
    max_states: int | None = None,
) -> tuple[list[M], S] | None:
    """Find a shortest move sequence from *start* to a goal state.

    *successors* maps a state to ``(move, next_state)`` pairs; states must be
    hashable so that revisits can be skipped.  Successors are expanded in the
    order they are produced, which makes the result deterministic.

    Returns ``(moves, goal_state)`` or ``None`` if no goal state is reachable
    (or more than *max_states* states would have to be explored).
    """
    parents: dict[S, tuple[S, M] | None] = {start: None}
    queue: deque[S] = deque([start])

    while queue:
        state = queue.popleft()
        if is_goal(state):
            logger.debug("goal found after exploring %d states", len(parents))
            return _path_to(parents, state), state
        for move, nxt in successors(state):
            if nxt in parents:
                continue
            parents[nxt] = (state, move)
            if max_states is not None and len(parents) > max_states:
                logger.debug("search abandoned after %d states", max_states)
                return None
            queue.append(nxt)

    logger.debug("no goal reachable; explored %d states", len(parents))
    return None


def _path_to(parents: dict[S, tuple[S, M] | None], state: S) -> list[M]:
    moves: list[M] = []
    link = parents[state]
    while link is not None:
        state, move = link
        moves.append(move)
        link = parents[state]
    moves.reverse()
    return moves
