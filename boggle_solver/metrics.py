import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class SolveStats:
    """Stage timings and result counters for one board solve."""

    def __init__(self):
        self.stage_ms: dict[str, float] = {}
        self.counters: dict[str, int] = {}
        self._began = time.perf_counter()

    @contextmanager
    def timed(self, stage: str):
        began = time.perf_counter()
        try:
            yield self
        finally:
            self.stage_ms[stage] = round((time.perf_counter() - began) * 1000, 1)
            logger.debug("solve stage %s took %.1fms", stage, self.stage_ms[stage])

    def record(self, **counters: int):
        self.counters.update(counters)

    @property
    def elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._began) * 1000, 1)

    def stage_timings(self) -> dict[str, float]:
        return {**self.stage_ms, "total": self.elapsed_ms}

    def log_summary(self):
        logger.info(
            "Solved %d cells: %d words, %d points in %.1fms",
            self.counters.get("cells", 0),
            self.counters.get("words", 0),
            self.counters.get("score", 0),
            self.elapsed_ms,
        )
