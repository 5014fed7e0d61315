"""Shared tuning constants for the geometry kernel.

This module centralizes the numeric thresholds used by
analysis/intersection.py.

All values are in integer coordinate units unless noted otherwise.
"""

# How far segment a may deviate from the X axis (in either coordinate) before
# the collision test's precondition assertions fire. Rotating integer points
# rounds each coordinate, so exact alignment can't be expected.
AXIS_ALIGNMENT_SLACK = 2
