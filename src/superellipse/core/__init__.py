"""Core geometry engine for superellipse.

This module contains the algorithms for:

- Angle sampling and the superellipse radius terms
- Per-corner exponent blending
- Path generation (symmetric, asymmetric, per-corner)
- Perimeter and area estimation
- Batch request processing

All engine functions are:
- Stateless (safe for use in worker processes)
- Pure (no side effects, no logging)
- Deterministic (identical inputs give identical outputs)

Key functions:
- generate_symmetric_path: One exponent for both axes
- generate_asymmetric_path: Independent x and y exponents
- generate_per_corner_path: Exponent blended between four corners
- generate_path: Path for a ShapeSpec
- estimate_perimeter / estimate_area / estimate_metrics: Numeric measurements
- blend_corner_exponent: Effective exponent at an angle

Key classes:
- PathProcessor: Runs batches of path requests in parallel
"""

from superellipse.core.blending import blend_corner_exponent
from superellipse.core.geometry import polyline_length, signed_area
from superellipse.core.metrics import estimate_area, estimate_metrics, estimate_perimeter
from superellipse.core.path import (
    format_path,
    generate_asymmetric_path,
    generate_path,
    generate_per_corner_path,
    generate_symmetric_path,
    recommended_steps,
    sample_outline,
)
from superellipse.core.processor import PathProcessor, build_path, process_request
from superellipse.core.sampling import radius_x, radius_y, sample_angles, signed_power

__all__ = [
    # Processor
    "PathProcessor",
    # Blending
    "blend_corner_exponent",
    "build_path",
    # Metrics
    "estimate_area",
    "estimate_metrics",
    "estimate_perimeter",
    # Path generation
    "format_path",
    "generate_asymmetric_path",
    "generate_path",
    "generate_per_corner_path",
    "generate_symmetric_path",
    "polyline_length",
    "process_request",
    # Sampling
    "radius_x",
    "radius_y",
    "recommended_steps",
    "sample_angles",
    "sample_outline",
    "signed_area",
    "signed_power",
]
