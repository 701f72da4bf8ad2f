"""Domain models for superellipse.

This module contains the value types passed into and returned from the
geometry engine. All models are designed to be:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (batch processing)
- Free of any engine logic or validation

Key classes:
- Point: A 2D point in the shape's local frame
- CornerExponents: Per-corner shape exponents
- ShapeSpec: Dimensions plus uniform or per-corner exponents
- SampleOptions: Step count and coordinate precision
- Metrics: Estimated perimeter and area
- PathRequest / PathResult: Batch processor messages
"""

from superellipse.domain.request import PathMode, PathRequest, PathResult
from superellipse.domain.shape import (
    CornerExponents,
    Metrics,
    Point,
    SampleOptions,
    ShapeSpec,
)

__all__: list[str] = [
    # Enums
    "PathMode",
    # Core types
    "Point",
    "CornerExponents",
    "ShapeSpec",
    "SampleOptions",
    "Metrics",
    # Processor messages
    "PathRequest",
    "PathResult",
]
