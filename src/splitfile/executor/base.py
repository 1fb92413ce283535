import abc
import logging
import typing

T = typing.TypeVar("T")
R = typing.TypeVar("R")


class BaseExecutor(abc.ABC):
    """
    Strategy that runs one callable over a batch of independent tasks.

    Implementations must return results in the order of ``items``, whatever
    order the tasks actually finish in.
    """

    logger: logging.Logger | None = None

    @abc.abstractmethod
    def run(
        self, func: typing.Callable[[T], R], items: typing.Sequence[T]
    ) -> list[R]:
        raise NotImplementedError

    def set_logger(self, logger: logging.Logger) -> None:
        self.logger = logger

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


__all__ = ["BaseExecutor"]
