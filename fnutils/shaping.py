from collections.abc import Iterable, Mapping, Sequence
from itertools import zip_longest

from more_itertools import chunked


def pick(obj: Mapping, keys: Iterable) -> dict:
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping, keys: Iterable) -> dict:
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def zip_all(*arrays: Sequence) -> list[list]:
    # pads the shorter inputs with None up to the longest one
    return [list(row) for row in zip_longest(*arrays)]


def group_n(items: Iterable, n: int) -> list[list]:
    if n < 1:
        raise ValueError(f"group size must be >= 1, got {n}")
    return list(chunked(items, n))
