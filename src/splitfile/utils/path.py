import os
import pathlib
from typing import List, Optional

PART_MARKER = ".sf-part"


def part_suffix(index: int, total: int) -> str:
    """
    Zero-padded part number, as wide as the decimal form of ``total``.
    e.g. index 3 of 14 -> "03", index 7 of 512 -> "007"
    """
    return str(index).zfill(len(str(total)))


def part_name(source: str | os.PathLike, index: int, total: int) -> str:
    """
    Full part path next to the source file.
    e.g. data/file.bin, 2 of 14 -> data/file.bin.sf-part02
    """
    return f"{os.fspath(source)}{PART_MARKER}{part_suffix(index, total)}"


def part_path(
    source: str | os.PathLike,
    index: int,
    total: int,
    destination_dir: Optional[str | os.PathLike] = None,
) -> str:
    """
    Output path for a part. With ``destination_dir`` only the base name of the
    part is kept and joined onto that directory.
    """
    name = part_name(source, index, total)
    if destination_dir is None:
        return name
    return os.path.join(os.fspath(destination_dir), os.path.basename(name))


def find_part_files(
    source: str | os.PathLike, directory: Optional[str | os.PathLike] = None
) -> List[str]:
    """
    Find existing parts of ``source`` in ``directory`` (defaults to the source
    directory), sorted lexically so zero-padded names come out in part order.
    """
    source_path = pathlib.Path(source)
    search_dir = source_path.parent if directory is None else pathlib.Path(directory)
    prefix = f"{source_path.name}{PART_MARKER}"

    return sorted(
        str(p)
        for p in search_dir.iterdir()
        if p.name.startswith(prefix)
        and p.name[len(prefix):].isdigit()
        and p.is_file()
    )
