import time
from typing import Callable, Optional

FRAME_TIME = "frame"
CLOCK_TIME = "clock"


class FrameRateGate:
    """
    Drops frames that arrive faster than the target cadence.

    A target of 0 lets every frame through. Intervals are only measured
    between frames timed by the same source (client timestamp or server
    clock). A source switch or a timestamp earlier than the last accepted
    one is a discontinuity: the frame is accepted and the gate re-anchors.
    """

    def __init__(self, target_fps: float = 30.0, clock: Callable[[], float] = time.monotonic):
        self.min_interval = 1.0 / target_fps if target_fps > 0 else 0.0
        self._clock = clock
        self._last_accepted: Optional[float] = None
        self._time_source: Optional[str] = None

    def accept(self, timestamp: Optional[float] = None) -> bool:
        """Return True when the frame should be classified."""
        if timestamp is not None:
            now, source = timestamp, FRAME_TIME
        else:
            now, source = self._clock(), CLOCK_TIME

        continuous = (
            self._last_accepted is not None
            and source == self._time_source
            and now >= self._last_accepted
        )
        if continuous and now - self._last_accepted < self.min_interval:
            return False

        self._last_accepted = now
        self._time_source = source
        return True

    def reset(self) -> None:
        self._last_accepted = None
        self._time_source = None
