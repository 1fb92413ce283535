import typing
from concurrent.futures import ThreadPoolExecutor, as_completed

from splitfile.executor.base import BaseExecutor, R, T


class ThreadExecutor(BaseExecutor):
    """
    Fans tasks out to a thread pool and joins on all of them.

    Results land in a slot list pre-sized to ``len(items)``, indexed by
    submission position. On the first failure the tasks that have not
    started yet are cancelled, running ones are allowed to finish, and that
    first error is raised.
    """

    def __init__(self, max_workers: int | None = None) -> None:
        super().__init__()
        self._max_workers = max_workers

    @property
    def max_workers(self) -> int | None:
        return self._max_workers

    def run(
        self, func: typing.Callable[[T], R], items: typing.Sequence[T]
    ) -> list[R]:
        items = list(items)
        results: list[typing.Any] = [None] * len(items)
        if not items:
            return results

        first_error: BaseException | None = None
        with ThreadPoolExecutor(
            max_workers=self._max_workers, thread_name_prefix="splitfile"
        ) as pool:
            futures = {
                pool.submit(func, item): position
                for position, item in enumerate(items)
            }
            for future in as_completed(futures):
                if future.cancelled():
                    continue
                error = future.exception()
                if error is None:
                    results[futures[future]] = future.result()
                    continue
                if first_error is None:
                    first_error = error
                    if self.logger:
                        self.logger.debug(
                            "Task %d failed, cancelling pending tasks",
                            futures[future],
                        )
                    for pending in futures:
                        pending.cancel()

        if first_error is not None:
            raise first_error
        return results

    def __repr__(self) -> str:
        return f"<ThreadExecutor max_workers={self._max_workers}>"


__all__ = ["ThreadExecutor"]
