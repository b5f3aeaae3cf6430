"""Pruning: drop undefined and empty-string entries from a nested structure."""
from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from datashape.constants import DEFAULT_VALUE_MARKER
from datashape.errors import UnsupportedInputError
from datashape.kinds import classify, is_container, type_tag

logger = logging.getLogger(__name__)

PRUNE_USAGE = "You must pass the prune method either a HashRef or an ArrayRef"


@dataclass(slots=True, frozen=True)
class PruneOptions:
    prune_empty_string: bool = True
    debug: bool = False
    value_marker: Any = DEFAULT_VALUE_MARKER


class _PruneRun:
    """State for one top-level prune call.

    The seen set holds ``id()`` values; the nodes themselves are pinned in
    ``_visited`` so an id cannot be reused by another object mid-walk.
    ``_copies`` maps each visited id to the container built for it, which is
    what a repeated map value points at instead of the input node.
    """

    def __init__(self, options: PruneOptions) -> None:
        self.options = options
        self._seen: set[int] = set()
        self._visited: list[Any] = []
        self._copies: dict[int, Any] = {}

    def mark(self, node: Any) -> bool:
        node_id = id(node)
        if node_id in self._seen:
            if self.options.debug:
                logger.debug("Seen referenced value: %s(0x%x) before", type_tag(node), node_id)
            return False
        self._seen.add(node_id)
        self._visited.append(node)
        return True

    def _is_prunable(self, value: Any) -> bool:
        if value is None:
            return True
        return self.options.prune_empty_string and isinstance(value, str) and value == ""

    def descend(self, node: Any) -> Any:
        if classify(node) == "map":
            return self.prune_map(node)
        return self.prune_sequence(node)

    def prune_map(self, mapping: Mapping[Any, Any]) -> dict[Any, Any]:
        pruned: dict[Any, Any] = {}
        self._copies[id(mapping)] = pruned
        for key, item in mapping.items():
            kind = classify(item)
            if kind in ("map", "sequence"):
                if self.mark(item):
                    pruned[key] = self.descend(item)
                else:
                    # Already walked (or being walked): reuse its pruned copy.
                    pruned[key] = self._copies[id(item)]
                continue
            if kind == "leaf" and self._is_prunable(item):
                continue
            pruned[key] = item
        return pruned

    def prune_sequence(self, items: Sequence[Any]) -> Any:
        if not any(is_container(item) for item in items):
            self._copies[id(items)] = self.options.value_marker
            return self.options.value_marker
        pruned: list[Any] = []
        self._copies[id(items)] = pruned
        for item in items:
            if not is_container(item):
                pruned.append(item)
            elif self.mark(item):
                pruned.append(self.descend(item))
        return pruned


@dataclass(slots=True, frozen=True)
class Pruner:
    options: PruneOptions = field(default_factory=PruneOptions)

    def prune(self, value: Any) -> Any:
        """Return a pruned copy of a map or sequence.

        Map entries holding ``None`` are dropped, as are entries holding ``""``
        when ``prune_empty_string`` is set. A sub-map that ends up empty is
        kept as an empty dict. A container met a second time during the same
        call is not walked again: as a map value it is replaced by the copy
        already built for it (so a self-referential map comes back
        self-referential), and as a sequence element it is omitted.
        """
        kind = classify(value)
        if kind not in ("map", "sequence"):
            raise UnsupportedInputError(PRUNE_USAGE, kind=kind)
        run = _PruneRun(self.options)
        run.mark(value)
        return run.descend(value)


def prune(value: Any, options: PruneOptions | None = None, **overrides: Any) -> Any:
    resolved = options or PruneOptions()
    if overrides:
        resolved = dataclasses.replace(resolved, **overrides)
    return Pruner(resolved).prune(value)


__all__ = [
    "PRUNE_USAGE",
    "PruneOptions",
    "Pruner",
    "prune",
]
