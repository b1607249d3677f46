import time
from typing import Callable, TypeVar

R = TypeVar("R")


def measure_time(operation: Callable[[], R]) -> tuple[R, float]:
    """
    Runs a zero-argument operation and returns (result, elapsed milliseconds).
    Exceptions raised by the operation propagate unchanged.
    """
    start_time = time.perf_counter()
    result = operation()
    end_time = time.perf_counter()
    return result, (end_time - start_time) * 1e3


def format_duration(duration_ms: float) -> str:
    """
    Renders a duration as "MM min. SS sec. mmm ms.".
    Minutes are not wrapped at the hour.
    """
    total_ms = int(round(duration_ms))
    minutes, rest = divmod(total_ms, 60_000)
    seconds, millis = divmod(rest, 1_000)
    return f"{minutes:02d} min. {seconds:02d} sec. {millis:03d} ms."


def print_measured(message: str, operation: Callable[[], R]) -> R:
    """Prints the message followed by the elapsed time, returns the operation's result."""
    result, elapsed = measure_time(operation)
    print(f"{message} {elapsed:.0f} ms")
    return result
