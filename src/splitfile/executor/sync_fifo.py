import typing

from splitfile.executor.base import BaseExecutor, R, T


class SyncFifoExecutor(BaseExecutor):
    """Runs tasks one by one on the calling thread; the first error stops the run."""

    def run(
        self, func: typing.Callable[[T], R], items: typing.Sequence[T]
    ) -> list[R]:
        return [func(item) for item in items]


__all__ = ["SyncFifoExecutor"]
