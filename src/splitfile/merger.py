import logging
import os
import typing

from splitfile.config import SplitFileSettings
from splitfile.copier import append_file
from splitfile.exceptions import InvalidArgumentError, PartIOError
from splitfile.report import OperationReport, get_logger


class FileMerger:
    """
    Concatenates parts into a single output file.

    Parts are appended strictly one after another, in the order given, through
    one output handle. The merger does not sort, check contiguity or look at
    part names. On failure the partially written output is left in place.
    """

    def __init__(
        self,
        settings: SplitFileSettings | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or SplitFileSettings()
        self.logger = logger or get_logger()
        self._report = OperationReport(operation="merge")

    @property
    def report(self) -> OperationReport:
        return self._report

    def merge(
        self,
        part_paths: typing.Iterable[str | os.PathLike],
        output_path: str | os.PathLike,
    ) -> str:
        """
        Write ``part_paths`` back to back into ``output_path`` and return it.

        Raises:
            InvalidArgumentError: ``part_paths`` is empty or a single path.
            PartIOError: A part could not be read or the output written.
        """
        if isinstance(part_paths, (str, bytes, os.PathLike)):
            raise InvalidArgumentError(
                "Make sure you input a list with files as first parameter!"
            )
        try:
            parts = [os.fspath(p) for p in part_paths]
        except TypeError as e:
            raise InvalidArgumentError(
                "Make sure you input a list with files as first parameter!"
            ) from e
        if not parts:
            raise InvalidArgumentError(
                "Make sure you input a list with files as first parameter!"
            )

        output = os.fspath(output_path)
        report = OperationReport(operation="merge", parts_total=len(parts))
        self._report = report
        report._mark_running()

        try:
            with open(output, "wb") as stream:
                for part in parts:
                    written = append_file(
                        part,
                        stream,
                        chunk_size=self.settings.chunk_size,
                        use_sendfile=self.settings.use_sendfile,
                    )
                    report.record_part(written)
                    self.logger.debug("Appended %s (%d bytes)", part, written)
        except OSError as e:
            error = PartIOError(f"Failed to write {output}: {e}", path=output)
            report._mark_failed(error)
            self.logger.error("Merge into %s failed: %s", output, error)
            raise error from e
        except Exception as e:
            report._mark_failed(e)
            self.logger.error("Merge into %s failed: %s", output, e)
            raise
        report._mark_completed()

        self.logger.info(
            "Merged %d parts (%d bytes) into %s in %.2fs",
            len(parts),
            report.bytes_copied,
            output,
            report.duration,
        )
        return output


def merge_files(
    part_paths: typing.Iterable[str | os.PathLike],
    output_path: str | os.PathLike,
) -> str:
    """Merge ``part_paths``, in the given order, into ``output_path``."""
    return FileMerger().merge(part_paths, output_path)


__all__ = ["FileMerger", "merge_files"]
