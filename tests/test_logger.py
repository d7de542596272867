import logging

import pytest

from pdfcollector.errors import FilesystemError
from pdfcollector.logger import LOGGER_NAME, append_log, init_log


def test_init_log_writes_header(tmp_path):
    log = init_log(tmp_path)
    log.close()
    lines = (tmp_path / "console-log.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Console log from ")
    assert lines[0].endswith(":")


def test_append_goes_to_file_and_stdout(tmp_path, capsys):
    with init_log(tmp_path) as log:
        append_log(log, "Copied PDF file from a to b\n")
        append_log(log, "No PDF files found in c")

    lines = (tmp_path / "console-log.txt").read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["Copied PDF file from a to b", "No PDF files found in c"]
    out = capsys.readouterr().out
    assert "Copied PDF file from a to b\n" in out
    assert "No PDF files found in c\n" in out


def test_init_log_truncates_previous_run(tmp_path):
    with init_log(tmp_path) as log:
        append_log(log, "first run")
    with init_log(tmp_path) as log:
        append_log(log, "second run")

    text = (tmp_path / "console-log.txt").read_text(encoding="utf-8")
    assert "first run" not in text
    assert text.count("Console log from") == 1


def test_append_mode_keeps_previous_sections(tmp_path):
    with init_log(tmp_path) as log:
        append_log(log, "first run")
    with init_log(tmp_path, append=True) as log:
        append_log(log, "second run")

    text = (tmp_path / "console-log.txt").read_text(encoding="utf-8")
    assert text.count("Console log from") == 2
    assert text.index("first run") < text.index("second run")


def test_write_failure_is_reported_not_raised(tmp_path, capsys):
    class BrokenStream:
        def write(self, _):
            raise OSError("disk full")

        def flush(self):
            pass

    with init_log(tmp_path) as log:
        file_handler = next(
            h for h in logging.getLogger(LOGGER_NAME).handlers
            if isinstance(h, logging.FileHandler)
        )
        real_stream = file_handler.stream
        file_handler.stream = BrokenStream()
        append_log(log, "lost line")
        file_handler.stream = real_stream

    captured = capsys.readouterr()
    assert "lost line" in captured.out
    assert "disk full" in captured.err


def test_unwritable_log_dir_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(FilesystemError):
        init_log(blocker / "logs")


def test_second_log_replaces_handlers(tmp_path):
    first = init_log(tmp_path / "one")
    second = init_log(tmp_path / "two")
    append_log(second, "only here")
    second.close()
    first.close()

    assert "only here" not in (tmp_path / "one" / "console-log.txt").read_text(encoding="utf-8")
    assert "only here" in (tmp_path / "two" / "console-log.txt").read_text(encoding="utf-8")
