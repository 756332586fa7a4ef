import asyncio
import threading
from functools import wraps

from loguru import logger

from fnutils.durations import to_seconds


async def delay(ms) -> None:
    await asyncio.sleep(to_seconds(ms))


def debounce(func, wait):
    """
    Postpone calls to func until `wait` milliseconds pass without another
    call. Only the latest arguments are used.
    """
    timer: threading.Timer | None = None

    def cancel():
        nonlocal timer
        if timer is not None:
            timer.cancel()
            timer = None

    @wraps(func)
    def debounced(*args, **kwargs):
        nonlocal timer
        if timer is not None:
            logger.debug(f"{func.__name__}: debounce rescheduled")
        cancel()
        timer = threading.Timer(to_seconds(wait), func, args, kwargs)
        timer.start()

    debounced.cancel = cancel
    return debounced


def throttle(func, wait):
    """Run func at most once per `wait` milliseconds, dropping the calls in between."""
    waiting = False

    def release():
        nonlocal waiting
        waiting = False

    @wraps(func)
    def throttled(*args, **kwargs):
        nonlocal waiting
        if waiting:
            logger.debug(f"{func.__name__}: throttled call dropped")
            return None
        result = func(*args, **kwargs)
        waiting = True
        threading.Timer(to_seconds(wait), release).start()
        return result

    return throttled


def once(func):
    ran = False
    result = None

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal ran, result
        if ran:
            return result
        result = func(*args, **kwargs)
        ran = True
        return result

    return wrapper
