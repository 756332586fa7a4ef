from datetime import timedelta


def to_millis(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        return duration / timedelta(milliseconds=1)
    return duration


def to_seconds(duration: float | timedelta) -> float:
    return to_millis(duration) / 1000
