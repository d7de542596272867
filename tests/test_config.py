import json
from pathlib import Path

import pytest

from pdfcollector.config import CollectorConfig, load_config
from pdfcollector.errors import ConfigError


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_full_config(tmp_path):
    cfg = load_config(write_json(tmp_path / "config.json", {
        "source_root": "/data/cases",
        "output_dir": "/data/out",
        "log_dir": "/data/logs",
        "range_start": 321,
        "range_end": 323,
        "copy_strategy": "whole",
        "append_log": True,
    }))
    assert cfg.source_root == Path("/data/cases")
    assert cfg.output_dir == Path("/data/out")
    assert cfg.resolved_log_dir == Path("/data/logs")
    assert (cfg.range_start, cfg.range_end) == (321, 323)
    assert cfg.copy_strategy == "whole"
    assert cfg.append_log is True


def test_defaults(tmp_path):
    cfg = load_config(write_json(tmp_path / "config.json", {
        "source_root": "/data/cases",
        "output_dir": "/data/out",
    }))
    assert cfg.range_start is None and cfg.range_end is None
    assert cfg.copy_strategy == "stream"
    assert cfg.append_log is False
    assert cfg.resolved_log_dir == Path("/data")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.json")


@pytest.mark.parametrize("data", [
    {"output_dir": "/out"},
    {"source_root": "/in"},
    {"source_root": "/in", "output_dir": "/out", "colour": "blue"},
    {"source_root": "/in", "output_dir": "/out", "range_start": "321"},
    {"source_root": "/in", "output_dir": "/out", "copy_strategy": "rsync"},
    {"source_root": "/in", "output_dir": "/out", "append_log": "false"},
    {"source_root": "", "output_dir": "/out"},
    ["/in", "/out"],
])
def test_invalid_content(tmp_path, data):
    with pytest.raises(ConfigError):
        load_config(write_json(tmp_path / "config.json", data))


def test_malformed_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_bool_is_not_a_range_bound():
    with pytest.raises(ConfigError):
        CollectorConfig(source_root=Path("a"), output_dir=Path("b"), range_start=True, range_end=5)
