from splitfile.executor.base import BaseExecutor
from splitfile.executor.sync_fifo import SyncFifoExecutor
from splitfile.executor.thread import ThreadExecutor

__all__ = ["BaseExecutor", "SyncFifoExecutor", "ThreadExecutor"]
