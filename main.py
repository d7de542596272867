from pathlib import Path

from pdfcollector.config import CollectorConfig, load_config
from pdfcollector.copier import SafeCopier
from pdfcollector.defaults import PREVIEW_LIMIT
from pdfcollector.errors import FilesystemError
from pdfcollector.picker import pick_latest_pdf
from pdfcollector.pipeline import run
from pdfcollector.selector import select_folders
from pdfcollector.utils import ensure_path

def ask_yes_no(prompt: str) -> bool:
    return input(prompt + " [y/N]: ").strip().lower() == "y"

def ask_int(prompt: str):
    while True:
        raw = input(prompt).strip()
        if not raw:
            return None
        try:
            return int(raw)
        except ValueError:
            print(f"Not a whole number: {raw!r}")

def ask_config() -> CollectorConfig:
    config_file = input("Path to config.json (leave empty to enter paths): ").strip() or None
    if config_file:
        return load_config(Path(config_file).expanduser().resolve())

    source = ensure_path(input("Source folder with case folders: ").strip())
    output_dir = Path(input("Output folder for the copied PDFs: ").strip()).expanduser().resolve()
    log_input = input("Folder for console-log.txt (blank = parent of output): ").strip()
    log_dir = Path(log_input).expanduser().resolve() if log_input else None
    range_start = ask_int("First folder number (blank = all folders): ")
    range_end = ask_int("Last folder number (blank = all folders): ")
    return CollectorConfig(
        source_root=source,
        output_dir=output_dir,
        log_dir=log_dir,
        range_start=range_start,
        range_end=range_end,
    )

def preview(config: CollectorConfig) -> int:
    folders = select_folders(config.source_root, config.range_start, config.range_end)
    copier = SafeCopier(config.output_dir, strategy=config.copy_strategy, dry_run=True)

    print(f"\n--- DRY RUN --- (first {PREVIEW_LIMIT} shown)")
    planned = 0
    for folder in folders:
        try:
            entry = pick_latest_pdf(config.source_root / folder)
        except FilesystemError as exc:
            print(f"{folder:40} !! {exc}")
            continue
        if entry is None:
            if planned < PREVIEW_LIMIT:
                print(f"{folder:40} -- no PDF files")
            continue
        r = copier.copy_one(entry, folder)
        if planned < PREVIEW_LIMIT:
            flag = f"({r.reason})" if r.reason else ""
            print(f"{r.src.name:40} -> {r.dst} {flag}")
        planned += 1
    print(f"\nTotal PDFs planned: {planned} of {len(folders)} folders")
    return planned

def main():
    config = ask_config()

    # Dry-run
    if not preview(config):
        print("Nothing to copy, the run will only log the skipped folders.")

    if not ask_yes_no("Proceed with copying?"):
        print("Aborted (dry-run only).")
        return

    summary = run(config)
    print(f"\nDone. {summary.describe()}")
    for outcome in summary.failed:
        print(f"  failed: {outcome.folder}: {outcome.error}")

if __name__ == "__main__":
    main()
