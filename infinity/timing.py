"""Frame timing and a once-a-second frame counter."""

from __future__ import annotations

import time
from typing import Callable


class TimeManager:
    """Measures the time between frames and reports frames per second."""

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        on_fps: Callable[[str], None] | None = None,
    ) -> None:
        self.clock = clock
        self.on_fps = on_fps
        self.prev_time = 0.0
        self.cur_time = 0.0
        self.delta_time = 0.0
        self.call_count = 0
        self.acc_time = 0.0

    def init(self) -> None:
        """Start measuring from now."""
        now = self.clock()
        self.prev_time = now
        self.cur_time = now

    def tick(self) -> float:
        """Measure the time since the last tick and return it.

        Once more than a second has gathered, the frame count is reported
        as "FPS : <count>" and counting starts again.
        """
        self.cur_time = self.clock()
        self.delta_time = self.cur_time - self.prev_time
        self.prev_time = self.cur_time

        self.call_count += 1
        self.acc_time += self.delta_time
        if self.acc_time > 1.0:
            if self.on_fps is not None:
                self.on_fps(f"FPS : {self.call_count}")
            self.call_count = 0
            self.acc_time -= 1.0
        return self.delta_time