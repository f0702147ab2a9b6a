import json
import logging
import math
import tomllib
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from buildreport.printer import ReportLabels
from buildreport.report import (
    Report,
    ReportEntry,
    ReportEntryCategory,
    TaskExecutionStatus,
    parse_elapsed,
)

from .types import ConfigError, ReportDocument, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)

_PARSERS: dict[str, tuple[Callable[[str], Any], type[Exception]]] = {
    "yaml": (yaml.safe_load, yaml.YAMLError),
    "toml": (tomllib.loads, tomllib.TOMLDecodeError),
    "json": (json.loads, json.JSONDecodeError),
}


def load_report(path: str | Path) -> ReportDocument:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Report file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Report path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    document = _build_document(raw_file)
    logger.debug(
        "Loaded %d report entries from %s (%s)", len(document.report), pure_path, fmt
    )
    return document


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    loads, parse_error = _PARSERS[fmt]
    try:
        raw_file = loads(path.read_text(encoding="utf-8"))
    except parse_error as exc:
        raise ConfigError(f"{path}: invalid {fmt.upper()}") from exc

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_document(raw: Mapping[str, Any]) -> ReportDocument:
    for field in raw.keys():
        if field not in {"entries", "labels"}:
            raise ConfigError(f"Can't process: {field}")

    if not "entries" in raw:
        raise ConfigError("Missing 'entries' field")

    if not isinstance(raw["entries"], list):
        raise ConfigError(f"'entries' must be a list, got {type(raw['entries'])}")

    entries = []
    for index, fields in enumerate(raw["entries"]):
        if not isinstance(fields, Mapping):
            raise ConfigError(f"entry {index}: must be a mapping")
        entries.append(_build_entry(index, fields))

    labels = _build_labels(raw.get("labels", {}))
    return ReportDocument(Report(tuple(entries)), labels)


def _build_entry(index: int, fields: Mapping[str, Any]) -> ReportEntry:
    keys = {"task", "duration", "status", "category"}

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"entry {index}: Can't process: {field}")

    if not "task" in fields:
        raise ConfigError(f"entry {index}: missing 'task'")

    if not isinstance(fields["task"], str):
        raise ConfigError(f"entry {index}: The task name should be a string")

    task_name = fields["task"].strip()

    if len(task_name) < 1:
        raise ConfigError(f"entry {index}: Task name missing")

    duration = _build_duration(index, fields.get("duration", 0))
    status = _build_enum(index, "status", fields, TaskExecutionStatus.EXECUTED)
    category = _build_enum(index, "category", fields, ReportEntryCategory.TASK)

    return ReportEntry(task_name, duration, status, category)


def _build_duration(index: int, value: Any) -> timedelta:
    # bool is an int subclass
    if isinstance(value, bool):
        raise ConfigError(f"entry {index}: duration should be a number or a string")

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise ConfigError(f"entry {index}: duration should be a finite number")
        if value < 0:
            raise ConfigError(f"entry {index}: duration can't be negative")
        try:
            return timedelta(seconds=value)
        except OverflowError as exc:
            raise ConfigError(f"entry {index}: duration is too large") from exc

    if isinstance(value, str):
        try:
            return parse_elapsed(value)
        except (OverflowError, ValueError) as exc:
            raise ConfigError(f"entry {index}: {exc}") from exc

    raise ConfigError(f"entry {index}: duration should be a number or a string")


def _build_enum(index: int, field: str, fields: Mapping[str, Any], default):
    if field not in fields:
        return default

    value = fields[field]
    enum_cls = type(default)
    if not isinstance(value, str):
        raise ConfigError(f"entry {index}: {field} should be a string")

    try:
        return enum_cls(value.strip().lower())
    except ValueError as exc:
        expected = ", ".join(member.value for member in enum_cls)
        raise ConfigError(
            f"entry {index}: unknown {field} {value!r}\n Expected one of: {expected}"
        ) from exc


def _build_labels(raw: Any) -> ReportLabels:
    keys = {"task", "duration", "total", "skipped"}
    labels = {}

    if not isinstance(raw, Mapping):
        raise ConfigError(f"'labels' must be a mapping, got {type(raw)}")

    for key, item in raw.items():
        if key not in keys:
            raise ConfigError(f"labels: Can't process: {key}")

        if not isinstance(item, str):
            raise ConfigError(f"labels: {key} should be a string")

        labels[key] = item

    return ReportLabels(**labels)
