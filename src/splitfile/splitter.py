import logging
import os
import stat

from splitfile.config import SplitFileSettings
from splitfile.copier import copy_range
from splitfile.exceptions import (
    EmptySourceError,
    InvalidArgumentError,
    InvalidSourceError,
)
from splitfile.executor.base import BaseExecutor
from splitfile.executor.thread import ThreadExecutor
from splitfile.planner import check_part_count, plan_by_count, plan_by_size
from splitfile.report import OperationReport, get_logger
from splitfile.structs import PartDescriptor, PartResult, SplitMode
from splitfile.utils.path import part_path


class FileSplitter:
    """
    Splits one source file into contiguous raw byte-range parts.

    Parts are named ``<source>.sf-part<N>`` with ``N`` zero-padded to the
    width of the part count, so a lexical sort of the names gives back the
    part order. Every part is copied by its own task on the executor; the
    returned paths are always in part order.

    Nothing is cleaned up on failure: parts finished before the error stay on
    disk, and the failing part may be truncated. Clear stale ``.sf-part*``
    files before re-running.
    """

    def __init__(
        self,
        executor: BaseExecutor | None = None,
        settings: SplitFileSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize a new FileSplitter.

        Args:
            executor: Strategy running the copy tasks. Defaults to a
                ThreadExecutor bounded by ``settings.max_workers``.
            settings: Chunk size and I/O tuning. Defaults to SplitFileSettings().
            logger: Optional custom logger.
        """
        self.settings = settings or SplitFileSettings()
        self.executor = executor or ThreadExecutor(
            max_workers=self.settings.max_workers
        )
        self.logger = logger or get_logger()
        self.executor.set_logger(self.logger)
        self._report = OperationReport(operation="split")

    @property
    def report(self) -> OperationReport:
        """Report of the last split run by this instance."""
        return self._report

    def split(
        self,
        path: str | os.PathLike,
        value: int | float,
        mode: SplitMode | str = SplitMode.COUNT,
        destination_dir: str | os.PathLike | None = None,
    ) -> list[str]:
        """
        Split ``path`` and return the produced part paths in part order.

        Args:
            path: Regular, non-empty file to split.
            value: Part count for ``SplitMode.COUNT``, maximum part size in
                bytes for ``SplitMode.SIZE``.
            mode: Planning strategy.
            destination_dir: Existing directory to write the parts to instead
                of the source directory.
        """
        try:
            mode = SplitMode(mode)
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown split mode: {mode!r}") from e
        if mode is SplitMode.COUNT:
            check_part_count(value)

        total_size = self._source_size(path)
        if destination_dir is not None and not os.path.isdir(destination_dir):
            raise InvalidArgumentError(
                "Destination directory does not exist: "
                f"{os.fspath(destination_dir)}"
            )

        if mode is SplitMode.COUNT:
            descriptors = plan_by_count(total_size, value)
        else:
            descriptors = plan_by_size(total_size, value)

        return self._run(os.fspath(path), descriptors, destination_dir)

    def split_by_count(
        self,
        path: str | os.PathLike,
        parts: int,
        destination_dir: str | os.PathLike | None = None,
    ) -> list[str]:
        return self.split(path, parts, SplitMode.COUNT, destination_dir)

    def split_by_size(
        self,
        path: str | os.PathLike,
        max_size: int | float,
        destination_dir: str | os.PathLike | None = None,
    ) -> list[str]:
        return self.split(path, max_size, SplitMode.SIZE, destination_dir)

    @staticmethod
    def _source_size(path: str | os.PathLike) -> int:
        try:
            st = os.stat(path)
        except (OSError, ValueError) as e:
            raise InvalidSourceError(f"Given file is not valid: {path}") from e
        if not stat.S_ISREG(st.st_mode):
            raise InvalidSourceError(f"Given file is not valid: {path}")
        if st.st_size == 0:
            raise EmptySourceError(f"File is empty: {path}")
        return st.st_size

    def _run(
        self,
        source: str,
        descriptors: list[PartDescriptor],
        destination_dir: str | os.PathLike | None,
    ) -> list[str]:
        total = len(descriptors)
        tasks = [
            (descriptor, part_path(source, descriptor.index, total, destination_dir))
            for descriptor in descriptors
        ]

        report = OperationReport(operation="split", parts_total=total)
        self._report = report
        chunk_size = self.settings.chunk_size
        use_sendfile = self.settings.use_sendfile

        def _copy_part(task: tuple[PartDescriptor, str]) -> PartResult:
            descriptor, target = task
            written = copy_range(
                source,
                descriptor.start,
                descriptor.end,
                target,
                chunk_size=chunk_size,
                use_sendfile=use_sendfile,
            )
            report.record_part(written)
            self.logger.debug(
                "Wrote part %d/%d [%d, %d) to %s",
                descriptor.index,
                total,
                descriptor.start,
                descriptor.end,
                target,
            )
            return PartResult(descriptor=descriptor, path=target, bytes_written=written)

        self.logger.debug(
            "Splitting %s into %d parts with %r", source, total, self.executor
        )
        report._mark_running()
        try:
            results = self.executor.run(_copy_part, tasks)
        except Exception as e:
            report._mark_failed(e)
            self.logger.error("Split of %s failed: %s", source, e)
            raise
        report._mark_completed()

        self.logger.info(
            "Split %s into %d parts (%d bytes) in %.2fs",
            source,
            total,
            report.bytes_copied,
            report.duration,
        )
        return [result.path for result in results]


def split_file(
    path: str | os.PathLike,
    parts: int,
    dest: str | os.PathLike | None = None,
) -> list[str]:
    """Split ``path`` into exactly ``parts`` parts."""
    return FileSplitter().split_by_count(path, parts, dest)


def split_file_by_size(
    path: str | os.PathLike,
    max_size: int | float,
    dest: str | os.PathLike | None = None,
) -> list[str]:
    """Split ``path`` into parts of at most ``max_size`` bytes."""
    return FileSplitter().split_by_size(path, max_size, dest)


__all__ = ["FileSplitter", "split_file", "split_file_by_size"]
