"""Node classification shared by the skeleton and prune walkers.

Every value handed to a walker falls into exactly one kind. Walkers dispatch on
the kind rather than on concrete types, so callers can feed any mapping or
sequence implementation and any plain object with fields.
"""
from __future__ import annotations

import dataclasses
import datetime
import enum
import inspect
import io
import numbers
import socket
import types
import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any, Literal

ValueKind = Literal[
    "leaf",
    "scalar_ref",
    "map",
    "sequence",
    "record",
    "opaque",
    "other",
]

_TEXT_TYPES = (str, bytes, bytearray)
_LEAF_TYPES = (
    numbers.Number,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    enum.Enum,
    uuid.UUID,
    PurePath,
)
_HANDLE_TYPES = (io.IOBase, socket.socket, types.ModuleType)
_OTHER_TYPES = (set, frozenset)


@dataclass(slots=True, frozen=True)
class ScalarRef:
    """A boxed single value. Walkers blank it as a unit and never unwrap it."""

    value: Any = None


def is_container(value: Any) -> bool:
    return classify(value) in ("map", "sequence")


def _slot_names(cls: type) -> list[str]:
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__") or name in names:
                continue
            names.append(name)
    return names


def record_fields(value: Any) -> dict[str, Any]:
    """Enumerate the fields of a record-like object into a fresh dict.

    Dataclass fields come first in declaration order, then instance
    attributes, then populated slots. Dunder names are skipped. Raises
    ``TypeError`` when the object exposes no enumerable fields at all.
    """
    fields: dict[str, Any] = {}
    enumerable = False
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        enumerable = True
        for field in dataclasses.fields(value):
            if hasattr(value, field.name):
                fields[field.name] = getattr(value, field.name)
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        enumerable = True
        for name, attr in instance_dict.items():
            if name.startswith("__") or name in fields:
                continue
            fields[name] = attr
    for name in _slot_names(type(value)):
        if name.startswith("__") or name in fields:
            continue
        try:
            fields[name] = getattr(value, name)
        except AttributeError:
            continue
        enumerable = True
    if not enumerable:
        raise TypeError(f"{type_tag(value)} exposes no enumerable fields")
    return fields


def has_fields(value: Any) -> bool:
    if isinstance(value, _HANDLE_TYPES) or inspect.isgenerator(value) or inspect.iscoroutine(value):
        return False
    try:
        record_fields(value)
    except TypeError:
        return False
    return True


def type_tag(value: Any) -> str:
    return type(value).__name__


def classify(value: Any) -> ValueKind:
    if value is None or isinstance(value, _TEXT_TYPES) or isinstance(value, _LEAF_TYPES):
        return "leaf"
    if isinstance(value, ScalarRef):
        return "scalar_ref"
    if isinstance(value, Mapping):
        return "map"
    if isinstance(value, Sequence):
        return "sequence"
    if isinstance(value, _OTHER_TYPES):
        return "other"
    if isinstance(value, type) or inspect.isroutine(value):
        return "leaf"
    if has_fields(value):
        return "record"
    return "opaque"


__all__ = [
    "ScalarRef",
    "ValueKind",
    "classify",
    "has_fields",
    "is_container",
    "record_fields",
    "type_tag",
]
