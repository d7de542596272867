import logging
import sys
from pathlib import Path
from datetime import datetime

from .defaults import LOG_FILE_NAME
from .errors import FilesystemError

LOGGER_NAME = "pdfcollector.run"


class RunLog:
    """
    Plain-text log of one run: every line goes to <log_dir>/console-log.txt
    and is echoed to stdout. Writing a line never raises; handler failures
    are reported on stderr by logging and otherwise ignored.
    """
    def __init__(self, log_dir: Path, append: bool = False, echo: bool = True):
        self.log_dir = Path(log_dir)
        self.path = self.log_dir / LOG_FILE_NAME

        # Header line starts a new section (or a new file when truncating)
        mode = "a" if append else "w"
        try:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with self.path.open(mode, encoding="utf-8") as f:
                if append and self.path.stat().st_size > 0:
                    f.write("\n")
                f.write(f"Console log from {datetime.now():%Y-%m-%d %H:%M:%S}:\n")
        except OSError as exc:
            raise FilesystemError(f"Cannot create log file {self.path}: {exc}") from exc

        # One run log at a time: drop whatever a previous RunLog left attached
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False
        self._detach(list(self._logger.handlers))

        formatter = logging.Formatter("%(message)s")
        file_handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        file_handler.setFormatter(formatter)
        self._handlers = [file_handler]

        if echo:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self._handlers.append(console_handler)

        for handler in self._handlers:
            self._logger.addHandler(handler)

    def append(self, message: str) -> None:
        self._logger.info(message.rstrip("\n"))

    def error(self, message: str) -> None:
        self._logger.error(message.rstrip("\n"))

    def close(self) -> None:
        self._detach(self._handlers)
        self._handlers = []

    def _detach(self, handlers) -> None:
        for handler in handlers:
            self._logger.removeHandler(handler)
            handler.close()

    def __enter__(self) -> "RunLog":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def init_log(log_dir: Path, append: bool = False) -> RunLog:
    return RunLog(log_dir, append=append)


def append_log(log: RunLog, message: str) -> None:
    log.append(message)
