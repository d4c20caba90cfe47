import logging
import time
from contextlib import contextmanager
from typing import Generator

_logger = logging.getLogger(__name__)


@contextmanager
def timer(name: str) -> Generator[None, None, None]:
    """Log how long a pipeline step took, whether or not it succeeded."""
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        _logger.info(f"⏱️  {name}: {elapsed:.2f}s")
