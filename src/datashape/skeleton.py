"""Skeletonization: blank every leaf of a nested structure while keeping its shape."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from datashape.constants import BLESSED_KEY, DEFAULT_VALUE_MARKER, OPAQUE_SUFFIX
from datashape.errors import UnsupportedInputError
from datashape.kinds import classify, is_container, record_fields, type_tag

DEFLESH_USAGE = "You need to pass the deflesh method either a hash or an array reference"


@dataclass(slots=True, frozen=True)
class Skeletonizer:
    value_marker: Any = DEFAULT_VALUE_MARKER
    blessed_key: str = BLESSED_KEY
    opaque_suffix: str = OPAQUE_SUFFIX

    def deflesh(self, value: Any) -> Any:
        """Return a copy of ``value`` with every leaf replaced by the marker.

        Maps and record-like objects keep their keys, sequences holding at
        least one container keep their length, and sequences of scalars
        collapse to a single marker. Records come back as plain dicts with
        an extra ``blessed_key`` entry naming their class, so the key set of
        a blanked record is one larger than its field set.
        """
        kind = classify(value)
        if kind == "map":
            return self._blank_map(value)
        if kind == "sequence":
            return self._blank_sequence(value)
        if kind == "record":
            return self._blank_record(value)
        raise UnsupportedInputError(DEFLESH_USAGE, kind=kind)

    def _blank_value(self, value: Any) -> Any:
        kind = classify(value)
        if kind in ("leaf", "scalar_ref"):
            return self.value_marker
        if kind == "map":
            return self._blank_map(value)
        if kind == "sequence":
            return self._blank_sequence(value)
        if kind == "record":
            return self._blank_record(value)
        if kind == "opaque":
            return f"{type_tag(value)}{self.opaque_suffix}"
        # Unrecognized values (sets and the like) are left as they are.
        return value

    def _blank_map(self, mapping: Mapping[Any, Any]) -> dict[Any, Any]:
        return {key: self._blank_value(item) for key, item in mapping.items()}

    def _blank_record(self, value: Any) -> dict[str, Any]:
        blanked = self._blank_map(record_fields(value))
        blanked[self.blessed_key] = type_tag(value)
        return blanked

    def _blank_sequence(self, items: Sequence[Any]) -> Any:
        if not any(is_container(item) for item in items):
            return self.value_marker
        blanked: list[Any] = []
        for item in items:
            kind = classify(item)
            if kind == "map":
                blanked.append(self._blank_map(item))
            elif kind == "sequence":
                blanked.append(self._blank_sequence(item))
            else:
                blanked.append(self.value_marker)
        return blanked


def deflesh(value: Any, value_marker: Any = DEFAULT_VALUE_MARKER) -> Any:
    return Skeletonizer(value_marker=value_marker).deflesh(value)


__all__ = [
    "DEFLESH_USAGE",
    "Skeletonizer",
    "deflesh",
]
