"""
Input and clock protocols - what the frame loop reads each frame
"""

from typing import Protocol

from arcade_pong.core.controls import DiscreteEvent
from arcade_pong.core.controls import Key


class InputSourceProtocol(Protocol):
    """
    Protocol for input backends.

    Held keys are sampled every frame while discrete events are reported
    once per physical press.
    """

    def held_keys(self) -> set[Key]:
        """Movement keys currently held down"""
        ...

    def poll_discrete_events(self) -> list[DiscreteEvent]:
        """
        Signals received since the previous poll.

        Returns:
            Events in arrival order
        """
        ...


class ClockProtocol(Protocol):
    """Protocol for frame timing"""

    def elapsed_since_last_frame(self) -> float:
        """Seconds elapsed since the previous call, never negative"""
        ...
