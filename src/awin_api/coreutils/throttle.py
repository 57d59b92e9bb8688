import time
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_CALLS_LIMIT = 20
WINDOW_SECONDS = 60


class RateThrottle:
    """Fixed-window call counter: after `limit` calls, sleep a full window.

    A falsy limit disables throttling. After the wait the counter restarts
    at 1 because the call that triggered the wait goes through.
    """

    def __init__(
        self,
        limit: Optional[int] = DEFAULT_CALLS_LIMIT,
        window_seconds: float = WINDOW_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self.count = 0
        self._sleep = sleep

    @property
    def enabled(self) -> bool:
        return bool(self.limit)

    def acquire(self) -> None:
        """Account for one outbound call, blocking if the limit is reached"""
        if not self.enabled:
            return

        if self.count < self.limit:
            self.count += 1
            return

        logger.warning(
            f"API call limit of {self.limit} reached, "
            f"waiting {self.window_seconds} seconds"
        )
        self._sleep(self.window_seconds)
        self.count = 1
