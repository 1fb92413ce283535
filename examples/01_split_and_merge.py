import hashlib
import os
import pathlib

from splitfile import find_part_files, merge_files, split_file, split_file_by_size


def md5(path: pathlib.Path) -> str:
    return hashlib.md5(path.read_bytes()).hexdigest()


def main():
    data_dir = pathlib.Path("examples/output_data")
    data_dir.mkdir(parents=True, exist_ok=True)

    source = data_dir / "random.bin"
    source.write_bytes(os.urandom(5 * 1024 * 1024 + 123))
    print(f"🚀 Source: {source} ({source.stat().st_size} bytes, md5 {md5(source)})")

    parts = split_file(source, 14)
    print(f"- Split into {len(parts)} parts: {parts[0]} ... {parts[-1]}")

    # Lexical order of the zero-padded names is the part order
    merged = data_dir / "random.merged.bin"
    merge_files(find_part_files(source), merged)
    print(f"✅ Merged back: md5 {md5(merged)}")

    parts_dir = data_dir / "by_size"
    parts_dir.mkdir(exist_ok=True)
    parts = split_file_by_size(source, 1024 * 1024, parts_dir)
    sizes = [pathlib.Path(p).stat().st_size for p in parts]
    print(f"- Split by size into {len(parts)} parts in {parts_dir}: {sizes}")


if __name__ == "__main__":
    main()
