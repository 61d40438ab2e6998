"""Append-only conversation log."""

import itertools
import logging

from easychat.models import Turn

logger = logging.getLogger(__name__)


class ConversationStore:
    """Ordered, append-only log of turns.

    The single source of truth rendered by the presentation layer. Turns
    are never edited or removed once appended.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        """Reserve the next monotonic turn id."""
        return next(self._ids)

    def append(self, turn: Turn) -> None:
        """Append a turn.

        Raises:
            ValueError: If the turn id does not follow the last stored id.
        """
        if self._turns and turn.id <= self._turns[-1].id:
            raise ValueError(f"Turn id {turn.id} is not after {self._turns[-1].id}")
        self._turns.append(turn)
        logger.debug(f"Stored {turn.role.value} turn {turn.id}")

    def snapshot(self) -> tuple[Turn, ...]:
        """Read-only view of all turns, oldest first."""
        return tuple(self._turns)

    def __len__(self) -> int:
        return len(self._turns)
