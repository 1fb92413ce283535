import hashlib
import pathlib
import random

import pytest

from splitfile.report import get_logger


@pytest.fixture(scope="session", autouse=True)
def splitfile_logger():
    # Bind the stdout handler to the session-wide capture, not to a capsys stream
    return get_logger()


@pytest.fixture
def make_file(tmp_path: pathlib.Path):
    def _make(name: str, size: int, seed: int = 0) -> pathlib.Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(random.Random(seed).randbytes(size))
        return path

    return _make


def md5_file(path) -> str:
    digest = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()
