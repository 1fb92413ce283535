from splitfile.config import SplitFileSettings
from splitfile.exceptions import (
    EmptySourceError,
    InvalidArgumentError,
    InvalidSourceError,
    PartIOError,
    SplitFileError,
    TooManyPartsError,
)
from splitfile.executor import BaseExecutor, SyncFifoExecutor, ThreadExecutor
from splitfile.merger import FileMerger, merge_files
from splitfile.planner import plan_by_count, plan_by_size, validate_plan
from splitfile.report import OperationReport, get_logger
from splitfile.splitter import FileSplitter, split_file, split_file_by_size
from splitfile.structs import OperationStatus, PartDescriptor, PartResult, SplitMode
from splitfile.utils.path import find_part_files, part_path

__all__ = [
    "split_file",
    "split_file_by_size",
    "merge_files",
    "FileSplitter",
    "FileMerger",
    "plan_by_count",
    "plan_by_size",
    "validate_plan",
    "find_part_files",
    "part_path",
    "PartDescriptor",
    "PartResult",
    "SplitMode",
    "OperationStatus",
    "OperationReport",
    "SplitFileSettings",
    "get_logger",
    # Executors
    "BaseExecutor",
    "SyncFifoExecutor",
    "ThreadExecutor",
    # Errors
    "SplitFileError",
    "InvalidArgumentError",
    "InvalidSourceError",
    "EmptySourceError",
    "TooManyPartsError",
    "PartIOError",
]
