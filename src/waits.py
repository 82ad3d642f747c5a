import time
from typing import Callable, TypeVar

from form_errors import LookupTimeout

T = TypeVar("T")

DEFAULT_TIMEOUT = 10.0
DEFAULT_INTERVAL = 0.25


def poll(
    condition: Callable[[], T],
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> T | None:
    """Call condition until it returns something truthy, or give up at the deadline.

    The condition always runs at least once, and once more at or after the
    deadline, so a miss is never reported early.
    """
    deadline = clock() + timeout
    while True:
        result = condition()
        if result:
            return result
        remaining = deadline - clock()
        if remaining <= 0:
            return None
        sleep(min(interval, remaining))


def wait_until(
    condition: Callable[[], T],
    description: str,
    timeout: float = DEFAULT_TIMEOUT,
    interval: float = DEFAULT_INTERVAL,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    result = poll(condition, timeout=timeout, interval=interval, clock=clock, sleep=sleep)
    if not result:
        raise LookupTimeout(description, timeout)
    return result
