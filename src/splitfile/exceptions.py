class SplitFileError(Exception):
    pass


class InvalidArgumentError(SplitFileError):
    pass


class InvalidSourceError(SplitFileError):
    pass


class EmptySourceError(SplitFileError):
    pass


class TooManyPartsError(SplitFileError):
    pass


class PartIOError(SplitFileError):
    """
    Raised when reading or writing a part fails.

    The original ``OSError`` is chained as ``__cause__``. Files written before
    the failure are left on disk.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


__all__ = [
    "SplitFileError",
    "InvalidArgumentError",
    "InvalidSourceError",
    "EmptySourceError",
    "TooManyPartsError",
    "PartIOError",
]
