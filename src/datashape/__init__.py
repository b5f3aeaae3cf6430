"""Structural transforms over nested data: skeletonize and prune."""
from __future__ import annotations

from datashape.errors import UnsupportedInputError
from datashape.kinds import ScalarRef, classify
from datashape.prune import PruneOptions, Pruner, prune
from datashape.skeleton import Skeletonizer, deflesh

__version__ = "0.1.0"

__all__ = [
    "PruneOptions",
    "Pruner",
    "ScalarRef",
    "Skeletonizer",
    "UnsupportedInputError",
    "__version__",
    "classify",
    "deflesh",
    "prune",
]
