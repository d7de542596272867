import time
from datetime import datetime
from typing import Optional

from .config import CollectorConfig
from .copier import SafeCopier, destination_for
from .errors import FilesystemError
from .logger import RunLog, init_log
from .models import CopyRecord, FolderOutcome, RunSummary, COPIED, NO_PDF, FAILED
from .picker import pick_latest_pdf
from .selector import select_folders
from .utils import ensure_output_dir


def _stamp() -> str:
    return f"{datetime.now():%Y-%m-%d %H:%M:%S}"


def process_folder(config: CollectorConfig, folder: str, copier: SafeCopier, log: RunLog) -> FolderOutcome:
    """
    Copy the newest PDF of one folder. Filesystem errors end up in the
    returned outcome instead of propagating to the caller.
    """
    folder_path = config.source_root / folder
    dst = destination_for(config.output_dir, folder)
    src = None
    try:
        entry = pick_latest_pdf(folder_path)
        if entry is None:
            log.append(f"No PDF files found in {folder_path}")
            return FolderOutcome(folder, NO_PDF)

        src = entry.path
        result = copier.copy_one(entry, folder)
    except FilesystemError as exc:
        source = src if src is not None else folder_path
        log.error(f"Failed to copy PDF from {source} to {dst} at {_stamp()}: {exc}")
        return FolderOutcome(folder, FAILED, src=src, dst=dst, error=str(exc))

    record = CopyRecord(result.src, result.dst, datetime.now())
    log.append(record.as_log_line())
    return FolderOutcome(folder, COPIED, src=result.src, dst=result.dst)


def run(config: CollectorConfig, log: Optional[RunLog] = None) -> RunSummary:
    """
    One pass over the source root: create the output directory, list the
    case folders, then copy the newest PDF of each folder. Problems with the
    source root or the output directory abort the run; problems inside a
    single folder are logged and the run moves on to the next one.
    """
    started = time.perf_counter()
    own_log = log is None
    if own_log:
        log = init_log(config.resolved_log_dir, append=config.append_log)

    try:
        if ensure_output_dir(config.output_dir):
            log.append(f"Created output directory: {config.output_dir}")

        folders = select_folders(config.source_root, config.range_start, config.range_end)
        log.append(f"Processing folders in {config.source_root}: {', '.join(folders)}")

        summary = RunSummary(config.source_root, config.output_dir)
        copier = SafeCopier(config.output_dir, strategy=config.copy_strategy, dry_run=False)
        for folder in folders:
            summary.add(process_folder(config, folder, copier, log))

        summary.elapsed = time.perf_counter() - started
        log.append("")
        log.append("Finished processing folders")
        log.append(summary.describe())
        return summary
    finally:
        if own_log:
            log.close()
