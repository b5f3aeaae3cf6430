from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

import yaml

OutputFormat = Literal["json", "yaml"]

_YAML_SUFFIXES = {".yaml", ".yml"}
SUPPORTED_FORMATS: tuple[str, ...] = ("json", "yaml")


def load_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def dump_document(value: Any, fmt: str = "json") -> str:
    if fmt == "json":
        return json.dumps(value, indent=2, sort_keys=True, ensure_ascii=False, default=str)
    if fmt == "yaml":
        return yaml.safe_dump(value, sort_keys=False, default_flow_style=False, allow_unicode=True)
    raise ValueError(f"Unsupported output format: {fmt}. Expected one of: {', '.join(SUPPORTED_FORMATS)}")


__all__ = [
    "SUPPORTED_FORMATS",
    "OutputFormat",
    "dump_document",
    "load_document",
]
