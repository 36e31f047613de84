"""Cone-boundary strategies and the numeric kernels they run on."""

from conespan.engine.cones import (
    ApproximateConeBoundaries,
    ConeBoundaryComputer,
    ExactConeBoundaries,
)
from conespan.engine.kernels import ExactKernel, FloatKernel, SympyKernel, supports_exact
from conespan.engine.registry import create_computer, get_registry, strategy

__all__ = [
    "ApproximateConeBoundaries",
    "ConeBoundaryComputer",
    "ExactConeBoundaries",
    "ExactKernel",
    "FloatKernel",
    "SympyKernel",
    "supports_exact",
    "create_computer",
    "get_registry",
    "strategy",
]
