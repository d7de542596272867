import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .defaults import COPY_STRATEGIES, DEFAULT_COPY_STRATEGY
from .errors import ConfigError

_KEYS = ("source_root", "output_dir", "log_dir", "range_start", "range_end", "copy_strategy", "append_log")


@dataclass(frozen=True)
class CollectorConfig:
    """Everything one run needs; passed into pipeline.run()."""
    source_root: Path
    output_dir: Path
    log_dir: Optional[Path] = None  # defaults to the output directory's parent
    range_start: Optional[int] = None
    range_end: Optional[int] = None
    copy_strategy: str = DEFAULT_COPY_STRATEGY
    append_log: bool = False

    def __post_init__(self):
        if self.copy_strategy not in COPY_STRATEGIES:
            raise ConfigError(
                f"Unknown copy strategy {self.copy_strategy!r}, expected one of {COPY_STRATEGIES}"
            )
        for name in ("range_start", "range_end"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.append_log, bool):
            raise ConfigError(f"append_log must be true or false, got {self.append_log!r}")

    @property
    def resolved_log_dir(self) -> Path:
        return self.log_dir if self.log_dir is not None else self.output_dir.parent


def _as_path(value) -> Path:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"Expected a path string, got {value!r}")
    return Path(value).expanduser()


def load_config(path: Path) -> CollectorConfig:
    """Read a CollectorConfig from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config in {path} must be a JSON object")

    unknown = set(data) - set(_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")
    for key in ("source_root", "output_dir"):
        if key not in data:
            raise ConfigError(f"Missing required key {key!r} in {path}")

    log_dir = data.get("log_dir")
    return CollectorConfig(
        source_root=_as_path(data["source_root"]),
        output_dir=_as_path(data["output_dir"]),
        log_dir=_as_path(log_dir) if log_dir is not None else None,
        range_start=data.get("range_start"),
        range_end=data.get("range_end"),
        copy_strategy=data.get("copy_strategy", DEFAULT_COPY_STRATEGY),
        append_log=data.get("append_log", False),
    )
