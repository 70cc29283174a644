"""Delayed, cancellable recomputation of match rankings.

Wraps MatchRanker in an Idle -> Calculating -> Idle cycle. A request made
while a computation is in flight is ignored. Each request carries a token;
a computation whose token has been superseded is discarded instead of
published.
"""

import asyncio
import logging
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple

from circlematch.matching.ranker import MatchRanker, MatchResult, ProfileInput

logger = logging.getLogger(__name__)

PublishCallback = Callable[[Tuple[MatchResult, ...]], None]


class RecomputeState(str, Enum):
    """State of the recompute cycle."""
    IDLE = "idle"
    CALCULATING = "calculating"


class MatchRecomputer:
    """Runs ranking passes as cancellable asyncio tasks."""

    def __init__(
        self,
        ranker: Optional[MatchRanker] = None,
        delay: float = 2.0,
        on_publish: Optional[PublishCallback] = None,
    ) -> None:
        """Initialize the recomputer.

        Args:
            ranker: Ranker to use (default: a new MatchRanker)
            delay: Seconds to wait before ranking
            on_publish: Called once with each published result tuple
        """
        if delay < 0:
            raise ValueError("delay must be non-negative")

        self.ranker = ranker or MatchRanker()
        self.delay = delay
        self.on_publish = on_publish

        self._state = RecomputeState.IDLE
        self._results: Tuple[MatchResult, ...] = ()
        self._token = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> RecomputeState:
        return self._state

    @property
    def is_calculating(self) -> bool:
        return self._state == RecomputeState.CALCULATING

    @property
    def results(self) -> Tuple[MatchResult, ...]:
        """Most recently published results."""
        return self._results

    @property
    def task(self) -> Optional[asyncio.Task]:
        """The in-flight task, if any."""
        return self._task

    def request(
        self,
        reference: ProfileInput,
        candidates: Iterable[ProfileInput],
    ) -> Optional[asyncio.Task]:
        """Request a recomputation.

        Inputs are validated immediately, so a malformed profile raises here
        and leaves the state and published results untouched. Must be called
        with a running event loop.

        Returns:
            The scheduled task, or None if a computation is already running

        Raises:
            InvalidProfileError: If any profile is malformed
            RuntimeError: If no event loop is running
        """
        if self.is_calculating:
            logger.debug("Recompute already in progress, ignoring request")
            return None

        reference, pool = self.ranker.validate(reference, candidates)
        loop = asyncio.get_running_loop()

        self._token += 1
        self._state = RecomputeState.CALCULATING
        self._task = loop.create_task(
            self._run(self._token, reference, pool)
        )
        return self._task

    def cancel(self) -> bool:
        """Cancel the in-flight computation, if any.

        Returns:
            True if a computation was cancelled
        """
        task = self._task
        if task is None or task.done():
            return False

        self._token += 1
        task.cancel()
        self._state = RecomputeState.IDLE
        self._task = None
        logger.info("Recompute cancelled")
        return True

    async def _run(self, token: int, reference, pool) -> Tuple[MatchResult, ...]:
        try:
            if self.delay:
                await asyncio.sleep(self.delay)

            results = tuple(self.ranker.rank(reference, pool))

            if token != self._token:
                logger.info(f"Discarding stale recompute (token {token})")
                return results

            self._results = results
            if self.on_publish is not None:
                self.on_publish(results)
            return results
        finally:
            if token == self._token:
                self._state = RecomputeState.IDLE
                self._task = None
