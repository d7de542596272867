from pathlib import Path
import shutil

from .defaults import COPY_CHUNK_SIZE, COPY_STRATEGIES, DEFAULT_COPY_STRATEGY, PDF_EXTENSION
from .errors import ConfigError, FilesystemError
from .models import FileEntry, CopyResult


def destination_for(output_dir: Path, folder_name: str) -> Path:
    return output_dir / f"{folder_name}{PDF_EXTENSION}"


def _copy_stream(src: Path, dst: Path) -> None:
    with src.open("rb") as fin, dst.open("wb") as fout:
        shutil.copyfileobj(fin, fout, COPY_CHUNK_SIZE)


def _copy_whole(src: Path, dst: Path) -> None:
    dst.write_bytes(src.read_bytes())


_STRATEGIES = {
    "stream": _copy_stream,
    "whole": _copy_whole,
}


def copy_to_output(source_file: Path, dest_folder_name: str, output_dir: Path,
                   strategy: str = DEFAULT_COPY_STRATEGY) -> Path:
    """
    Copy source_file to output_dir/<dest_folder_name>.pdf, overwriting any
    existing file there. Returns the destination path.
    """
    if strategy not in _STRATEGIES:
        raise ConfigError(f"Unknown copy strategy {strategy!r}, expected one of {COPY_STRATEGIES}")

    source_file = Path(source_file)
    dest = destination_for(Path(output_dir), dest_folder_name)
    try:
        _STRATEGIES[strategy](source_file, dest)
        expected = source_file.stat().st_size
        written = dest.stat().st_size
    except OSError as exc:
        raise FilesystemError(f"Failed to copy {source_file} to {dest}: {exc}") from exc

    if written != expected:
        raise FilesystemError(
            f"Incomplete copy of {source_file} to {dest}: wrote {written} of {expected} bytes"
        )
    return dest


class SafeCopier:
    def __init__(self, output_dir: Path, strategy: str = DEFAULT_COPY_STRATEGY, dry_run: bool = True):
        if strategy not in _STRATEGIES:
            raise ConfigError(f"Unknown copy strategy {strategy!r}, expected one of {COPY_STRATEGIES}")
        self.output_dir = output_dir
        self.strategy = strategy
        self.dry_run = dry_run

    def copy_one(self, entry: FileEntry, folder_name: str) -> CopyResult:
        dest_file = destination_for(self.output_dir, folder_name)
        reason = "overwrote existing" if dest_file.exists() else ""

        if self.dry_run:
            return CopyResult(entry.path, dest_file, performed=False, reason=reason)

        # Real copy
        dest_file = copy_to_output(entry.path, folder_name, self.output_dir, self.strategy)
        return CopyResult(entry.path, dest_file, performed=True, reason=reason)
