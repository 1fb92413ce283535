import enum
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SplitMode(enum.Enum):
    """
    Strategy used to plan the byte ranges of a split.

    - COUNT: a fixed number of parts, the last one absorbing the remainder.
    - SIZE: parts of at most ``max_size`` bytes, the last one possibly shorter.
    """

    COUNT = "count"
    SIZE = "size"


class OperationStatus(enum.Enum):
    """
    Lifecycle status of a split or merge operation.

    - PENDING: Operation hasn't started yet.
    - RUNNING: Copy tasks are in progress.
    - COMPLETED: Every byte was copied.
    - FAILED: A task raised; partial output is left on disk.
    """

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class PartDescriptor(BaseModel):
    """
    Half-open byte range ``[start, end)`` of the source assigned to one part.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    start: int = Field(ge=0)
    end: int

    @model_validator(mode="after")
    def _check_range(self) -> "PartDescriptor":
        if self.end <= self.start:
            raise ValueError(
                f"end ({self.end}) must be greater than start ({self.start})"
            )
        return self

    @property
    def size(self) -> int:
        return self.end - self.start


@dataclass
class PartResult:
    """Outcome of a single copy task."""

    descriptor: PartDescriptor
    path: str
    bytes_written: int = 0
