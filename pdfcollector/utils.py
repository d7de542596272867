from pathlib import Path
from .errors import FilesystemError

def ensure_path(path_str: str) -> Path:
    """Return a resolved Path object and ensure it exists."""
    p = Path(path_str).expanduser().resolve()
    if not p.exists():
        raise FileNotFoundError(f"Path does not exist: {p}")
    return p


def ensure_output_dir(output_dir: Path) -> bool:
    """
    Create the output directory if it is missing.
    Returns True when the directory had to be created.
    """
    if output_dir.is_dir():
        return False
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Cannot create output directory {output_dir}: {exc}") from exc
    return True


def validate_source_root(src: Path) -> None:
    try:
        valid = src.is_dir()
    except OSError as exc:
        raise FilesystemError(f"Cannot access source folder {src}: {exc}") from exc
    if not valid:
        raise FilesystemError(f"Source folder invalid: {src}")
