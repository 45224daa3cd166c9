import time
from collections import deque
from typing import Callable

from shared.helper.HelperConfig import HelperConfig


class RateLimiter:
    """Sliding-window request counter, local to this process.

    Every accepted request is timestamped; a request is rejected once the
    window already holds `limit` timestamps. Rejected requests are not
    recorded, so they do not extend the lockout.
    """

    def __init__(self, helper_config: HelperConfig, limit: int | None = None, window: float | None = None, clock: Callable[[], float] = time.monotonic):
        self.logging = helper_config.get_logger()
        self.limit = limit if limit is not None else int(helper_config.get_number_val("WEBHOOK_RATE_LIMIT", default=30))
        self.window = window if window is not None else helper_config.get_number_val("WEBHOOK_RATE_WINDOW", default=60)
        self._clock = clock
        self._requests: deque[float] = deque()

    def _prune(self, now: float) -> None:
        while self._requests and self._requests[0] < now - self.window:
            self._requests.popleft()

    def hit(self) -> bool:
        """Record a request.

        Returns:
            bool: True if the request is allowed, False if the window is full.
        """
        now = self._clock()
        self._prune(now)
        if len(self._requests) >= self.limit:
            self.logging.warning("Rate limit of %d requests per %ss exceeded.", self.limit, self.window)
            return False
        self._requests.append(now)
        return True

    def retry_after(self) -> int:
        return int(self.window)

