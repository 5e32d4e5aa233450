"""Deferred actions driven by the owner's clock."""

import logging
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass
class DeferredAction:
    """A callback waiting for the scheduler clock to reach ``due``."""

    due: float
    callback: Callable[..., None]
    args: tuple[Any, ...] = ()
    sequence: int = 0
    cancelled: bool = field(default=False, init=False)
    fired: bool = field(default=False, init=False)

    def cancel(self) -> None:
        """Prevent the action from running."""
        self.cancelled = True

    @property
    def is_pending(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler:
    """
    Runs deferred actions on the caller's thread.

    Nothing happens in the background: time only moves when the owner calls
    ``advance``, typically once per frame, so every callback runs on the same
    execution context that owns the game state.
    """

    def __init__(self) -> None:
        self._time = 0.0
        self._actions: list[DeferredAction] = []
        self._sequence = count()

    @property
    def time(self) -> float:
        """Return the scheduler clock in seconds."""
        return self._time

    @property
    def pending(self) -> int:
        """Return the number of actions still waiting to run."""
        return sum(1 for action in self._actions if action.is_pending)

    def call_later(
        self,
        delay: float,
        callback: Callable[..., None],
        *args: Any,
    ) -> DeferredAction:
        """
        Schedule a callback.

        Args:
            delay: Seconds from the current clock
            callback: Function to run once the delay has elapsed
            *args: Positional arguments for the callback

        Returns:
            Handle that can be cancelled
        """
        if delay < 0:
            raise ValueError("Delay must not be negative")

        action = DeferredAction(
            due=self._time + delay,
            callback=callback,
            args=args,
            sequence=next(self._sequence),
        )
        self._actions.append(action)
        return action

    def cancel(self, action: DeferredAction) -> None:
        """Cancel a scheduled action."""
        action.cancel()
        self._actions = [a for a in self._actions if a is not action]

    def cancel_all(self) -> int:
        """
        Cancel every waiting action.

        Returns:
            Number of actions cancelled
        """
        cancelled = 0
        for action in self._actions:
            if action.is_pending:
                action.cancel()
                cancelled += 1
        self._actions.clear()
        if cancelled:
            logger.debug("Cancelled %d deferred action(s)", cancelled)
        return cancelled

    def advance(self, dt: float) -> int:
        """
        Move the clock forward and run everything that became due.

        Actions run in due-time order, ties in scheduling order. Actions
        scheduled by a callback wait for the next call. If a callback
        raises, the rest of the batch stays queued for the next call.

        Args:
            dt: Elapsed time in seconds

        Returns:
            Number of actions run
        """
        if dt < 0:
            raise ValueError("Cannot move the clock backwards")

        self._time += dt

        # Due actions stay queued until they fire
        due = sorted(
            (a for a in self._actions if a.is_pending and a.due <= self._time),
            key=lambda a: (a.due, a.sequence),
        )

        ran = 0
        for action in due:
            # An earlier callback may have cancelled this one
            if action.cancelled:
                continue
            action.fired = True
            self._actions = [a for a in self._actions if a is not action]
            action.callback(*action.args)
            ran += 1
        return ran
