"""Thread pool fan-out over independent units of work."""

from collections.abc import Callable, Iterable
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def parallel_map(
    func: Callable[[T], R],
    items: Iterable[T],
    max_workers: int | None = None,
) -> list[R]:
    """Apply func to every item on a thread pool.

    Results are returned in input order. The first task that raises aborts
    the batch: pending tasks are cancelled and the exception propagates to
    the caller. Work that already finished is not rolled back.

    Args:
        func: Function to run for each item
        items: Independent units of work
        max_workers: Maximum worker threads (None = executor default)

    Returns:
        List of results, one per item, in input order
    """
    items = list(items)
    if not items:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: list[Future[R]] = [executor.submit(func, item) for item in items]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)

        errors = [f.exception() for f in futures if f in done and f.exception() is not None]
        if errors:
            executor.shutdown(wait=True, cancel_futures=True)
            raise errors[0]  # type: ignore[misc]

        return [future.result() for future in futures]
