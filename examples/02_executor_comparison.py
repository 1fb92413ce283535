import logging
import os
import pathlib

from splitfile import (
    FileSplitter,
    SplitFileSettings,
    SyncFifoExecutor,
    ThreadExecutor,
    get_logger,
)


def run(name: str, splitter: FileSplitter, source: pathlib.Path, parts: int):
    splitter.split_by_count(source, parts)
    report = splitter.report
    print(
        f"{name:<18} {report.parts_done} parts, "
        f"{report.bytes_per_second / 1024 / 1024:.2f} MB/s, "
        f"{report.duration:.3f}s"
    )


def main():
    logger = get_logger()
    logger.setLevel(logging.WARNING)

    data_dir = pathlib.Path("examples/output_data")
    data_dir.mkdir(parents=True, exist_ok=True)
    source = data_dir / "big.bin"
    source.write_bytes(os.urandom(64 * 1024 * 1024))

    buffered = SplitFileSettings(use_sendfile=False, chunk_size=256 * 1024)

    run("sync + sendfile", FileSplitter(executor=SyncFifoExecutor()), source, 512)
    run("threads + sendfile", FileSplitter(executor=ThreadExecutor(8)), source, 512)
    run(
        "threads + buffered",
        FileSplitter(executor=ThreadExecutor(8), settings=buffered),
        source,
        512,
    )


if __name__ == "__main__":
    main()
