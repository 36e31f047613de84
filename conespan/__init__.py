"""conespan — equal-angle cone boundaries for cone-based spanners."""

from conespan.engine import (
    ApproximateConeBoundaries,
    ConeBoundaryComputer,
    ExactConeBoundaries,
    create_computer,
)
from conespan.errors import (
    ConeSpanError,
    InvalidConeCount,
    RootIsolationFailure,
    UnknownStrategy,
)
from conespan.utils.direction import Direction

__all__ = [
    "ApproximateConeBoundaries",
    "ConeBoundaryComputer",
    "ExactConeBoundaries",
    "create_computer",
    "ConeSpanError",
    "InvalidConeCount",
    "RootIsolationFailure",
    "UnknownStrategy",
    "Direction",
]
