from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from datashape.constants import OPTIONS_ENV_DEBUG
from datashape.prune import PruneOptions
from datashape.skeleton import Skeletonizer

_SKELETON_KEYS = {"value_marker"}
_PRUNE_KEYS = {item.name for item in fields(PruneOptions)}


@dataclass(slots=True, frozen=True)
class ShapeConfig:
    skeleton: Skeletonizer = field(default_factory=Skeletonizer)
    prune: PruneOptions = field(default_factory=PruneOptions)


def _section(raw: dict[str, Any], name: str, allowed: set[str], path: Path) -> dict[str, Any]:
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"`{name}` in {path} must be a mapping")
    unknown = sorted(set(section) - allowed)
    if unknown:
        raise ValueError(f"Unknown `{name}` option(s) in {path}: {', '.join(map(str, unknown))}")
    return dict(section)


def _env_debug() -> bool:
    return os.getenv(OPTIONS_ENV_DEBUG) == "1"


def load_options(path: Path | None = None) -> ShapeConfig:
    """Load transform options from a YAML file.

    Both the ``skeleton`` and ``prune`` sections are optional. Setting
    ``DATASHAPE_DEBUG=1`` turns prune debugging on regardless of the file.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Options file {path} must be a mapping")
        unknown = sorted(set(loaded) - {"skeleton", "prune"})
        if unknown:
            raise ValueError(f"Unknown section(s) in {path}: {', '.join(map(str, unknown))}")
        raw = loaded

    skeleton_values = _section(raw, "skeleton", _SKELETON_KEYS, path or Path("."))
    prune_values = _section(raw, "prune", _PRUNE_KEYS, path or Path("."))
    if "prune_empty_string" in prune_values and not isinstance(prune_values["prune_empty_string"], bool):
        raise ValueError("`prune.prune_empty_string` must be a boolean")
    if _env_debug():
        prune_values["debug"] = True
    return ShapeConfig(
        skeleton=Skeletonizer(**skeleton_values),
        prune=PruneOptions(**prune_values),
    )


__all__ = [
    "ShapeConfig",
    "load_options",
]
