"""Numeric constants shared by the Durand–Kerner solver and its callers."""

from __future__ import annotations

DEFAULT_MAX_ITER = 200
DEFAULT_TOL = 1e-12

# below this |prod(root_i - root_j)| the reference stabilisation kicks in
REFERENCE_DENOM_EPS = 1e-18
# floor on |prod(root_i - root_j)|**2 for the guarded complex division
GUARDED_DENOM_SQ_FLOOR = 1e-300

UPDATE_SEQUENTIAL = "sequential"
UPDATE_JACOBI = "jacobi"
UPDATE_SCHEMES = (UPDATE_SEQUENTIAL, UPDATE_JACOBI)

DENOMINATOR_GUARDED = "guarded"
DENOMINATOR_REFERENCE = "reference"
DENOMINATOR_POLICIES = (DENOMINATOR_GUARDED, DENOMINATOR_REFERENCE)


__all__ = [
    "DEFAULT_MAX_ITER",
    "DEFAULT_TOL",
    "DENOMINATOR_GUARDED",
    "DENOMINATOR_POLICIES",
    "DENOMINATOR_REFERENCE",
    "GUARDED_DENOM_SQ_FLOOR",
    "REFERENCE_DENOM_EPS",
    "UPDATE_JACOBI",
    "UPDATE_SCHEMES",
    "UPDATE_SEQUENTIAL",
]
