import asyncio
import inspect
import json
from datetime import datetime, timedelta
from functools import wraps

from loguru import logger

from fnutils.durations import to_millis


def make_key(args: tuple, kwargs: dict) -> str:
    # positional-only calls key as a JSON array ("[1]"), calls with keyword
    # arguments as an object, so the two shapes never collide.
    # Objects without a JSON form fall back to repr(), which for most classes
    # embeds id(); a collected object's id can be reused, so pass get_key for
    # methods and other identity-keyed arguments.
    if kwargs:
        return json.dumps(
            {"args": list(args), "kwargs": sorted(kwargs.items())}, default=repr
        )
    return json.dumps(list(args), default=repr)


class Cache:
    def __init__(self, ttl=None):
        self.store = {}
        self.ttl: float | None = to_millis(ttl) if ttl else None

    def get(self, key):
        """
        Look up a key, returning a (value, hit) pair.

        Stale entries count as misses but stay in the store until the next
        set() overwrites them.
        """
        entry = self.store.get(key)
        if entry is None:
            return None, False
        if self.ttl is None:
            return entry["value"], True
        age = (datetime.now() - entry["stored_at"]) / timedelta(milliseconds=1)
        if age < self.ttl:
            return entry["value"], True
        logger.debug(f"Cache entry {key} expired ({age:.0f}ms old)")
        return None, False

    def peek(self, key):
        entry = self.store.get(key)
        return entry["value"] if entry else None

    def set(self, key, value):
        self.store[key] = {"value": value, "stored_at": datetime.now()}

    def delete(self, key):
        if key in self.store:
            del self.store[key]

    def clear(self):
        self.store.clear()

    def __contains__(self, key):
        return key in self.store

    def __len__(self):
        return len(self.store)


class Memoize:
    def __init__(self, get_key=None, ttl=None):
        self.get_key = get_key
        self.ttl = ttl

    def key_for(self, args: tuple, kwargs: dict) -> str:
        if self.get_key:
            return self.get_key(*args, **kwargs)
        return make_key(args, kwargs)

    def __call__(self, func):
        cache = Cache(self.ttl)

        if inspect.iscoroutinefunction(func):

            async def settle(key, coro):
                try:
                    return await coro
                except (Exception, asyncio.CancelledError):
                    if cache.peek(key) is asyncio.current_task():
                        cache.delete(key)
                    raise

            @wraps(func)
            async def memoizer(*args, **kwargs):
                key = self.key_for(args, kwargs)
                task, hit = cache.get(key)
                if not hit:
                    logger.debug(f"{func.__name__}: cache miss for {key}")
                    task = asyncio.ensure_future(settle(key, func(*args, **kwargs)))
                    cache.set(key, task)
                return await asyncio.shield(task)

        else:

            @wraps(func)
            def memoizer(*args, **kwargs):
                key = self.key_for(args, kwargs)
                result, hit = cache.get(key)
                if hit:
                    return result
                logger.debug(f"{func.__name__}: cache miss for {key}")
                result = func(*args, **kwargs)
                cache.set(key, result)
                return result

        memoizer.cache = cache
        return memoizer


def memoize(func=None, get_key=None, ttl=None):
    """
    Cache the results of func.

    get_key derives the cache key from the call arguments, defaulting to a
    JSON dump of them. ttl is in milliseconds (or a timedelta); without it
    entries never expire. Called without func it returns a decorator.

    The default key identifies most objects by id(), so memoized methods on
    short-lived instances should supply get_key.
    """
    if func is None:
        return Memoize(get_key, ttl)
    return Memoize(get_key, ttl)(func)
