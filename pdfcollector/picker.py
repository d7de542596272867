import stat
from pathlib import Path
from typing import List, Optional

from .defaults import PDF_EXTENSION
from .errors import FilesystemError
from .models import FileEntry


def list_pdf_files(folder_path: Path) -> List[FileEntry]:
    """Regular files in folder_path with a .pdf extension (any case), sorted by name."""
    try:
        paths = sorted(folder_path.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise FilesystemError(f"Cannot list folder {folder_path}: {exc}") from exc

    files: List[FileEntry] = []
    for p in paths:
        if p.suffix.lower() != PDF_EXTENSION:
            continue
        # lstat so symlinks are skipped rather than followed
        try:
            st = p.lstat()
        except OSError as exc:
            raise FilesystemError(f"Cannot stat {p}: {exc}") from exc
        if not stat.S_ISREG(st.st_mode):
            continue
        files.append(FileEntry(path=p, name=p.name, mtime=st.st_mtime))
    return files


def latest(files: List[FileEntry]) -> Optional[FileEntry]:
    """Newest entry by mtime; on a tie the first one in the list is kept."""
    picked: Optional[FileEntry] = None
    for f in files:
        if picked is None or f.mtime > picked.mtime:
            picked = f
    return picked


def pick_latest_pdf(folder_path: Path) -> Optional[FileEntry]:
    return latest(list_pdf_files(Path(folder_path)))
