"""Run timer used for the final status line."""

import time


class RunTimer:
    def __init__(self, clock=time.perf_counter):
        self.clock = clock
        self.started_at = clock()

    def elapsed(self) -> float:
        return self.clock() - self.started_at

    def summary(self) -> str:
        elapsed = self.elapsed()
        if elapsed < 60:
            return f"Time: {elapsed:.2f}s"
        minutes, seconds = divmod(int(elapsed), 60)
        return f"Time: {minutes}m {seconds:02d}s"
