import functools
import logging
import time


class LogDuration:
    """
    Context manager logging how long its block took.

    with LogDuration("Indexing"):
        ...

    logs "Indexing: 12 ms" when the block exits, also when it raises.
    """

    def __init__(self, operation: str, logger: logging.Logger = None, level: int = logging.INFO):
        self.operation = operation
        self.logger = logger or logging.getLogger(__name__)
        self.level = level
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.elapsed = time.perf_counter() - self.start_time
        self.logger.log(self.level, "%s: %d ms", self.operation, self.elapsed * 1000)
        return False


def log_duration(operation: str, logger: logging.Logger = None, level: int = logging.INFO):
    """Decorator form of LogDuration."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with LogDuration(operation, logger, level):
                return func(*args, **kwargs)
        return wrapper
    return decorator
