from dataclasses import dataclass, field
from pathlib import Path
from datetime import datetime
from typing import List, Optional

@dataclass(frozen=True)
class FileEntry:
    path: Path
    name: str
    mtime: float  # epoch seconds, as reported by stat()
    is_file: bool = True

@dataclass(frozen=True)
class CopyResult:
    src: Path
    dst: Path
    performed: bool  # False if dry-run
    reason: str = ""  # e.g., "overwrote existing", "dry run"


@dataclass(frozen=True)
class CopyRecord:
    src: Path
    dst: Path
    timestamp: datetime

    def as_log_line(self) -> str:
        return f"Copied PDF file from {self.src} to {self.dst} at {self.timestamp:%Y-%m-%d %H:%M:%S}"


COPIED = "copied"
NO_PDF = "no_pdf"
FAILED = "failed"

@dataclass(frozen=True)
class FolderOutcome:
    folder: str
    status: str  # one of COPIED, NO_PDF, FAILED
    src: Optional[Path] = None
    dst: Optional[Path] = None
    error: str = ""


@dataclass
class RunSummary:
    source_root: Path
    output_dir: Path
    outcomes: List[FolderOutcome] = field(default_factory=list)
    elapsed: float = 0.0

    def add(self, outcome: FolderOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def copied(self) -> List[FolderOutcome]:
        return [o for o in self.outcomes if o.status == COPIED]

    @property
    def skipped(self) -> List[FolderOutcome]:
        return [o for o in self.outcomes if o.status == NO_PDF]

    @property
    def failed(self) -> List[FolderOutcome]:
        return [o for o in self.outcomes if o.status == FAILED]

    def describe(self) -> str:
        return (
            f"Copied {len(self.copied)} PDF files, "
            f"{len(self.skipped)} folders without PDFs, "
            f"{len(self.failed)} failed, in {self.elapsed:.3f}s"
        )
