"""
===============================================================================
QUATALG - Numeric Constants and Default Tolerances
===============================================================================
Central repository for the constants used by the quaternion algebra. The
tolerances here are only defaults; the active values live in
quatalg.config and may be overridden at runtime or from a YAML file.
===============================================================================
"""


# =============================================================================
# ALGEBRAIC CONSTANTS
# =============================================================================
HALF = 0.5                 # Commutator factor: cross(a, b) = 0.5 * (ab - ba)
COMPONENT_COUNT = 4        # real + three imaginary parts
IMAG_COMPONENT_COUNT = 3

# =============================================================================
# DEFAULT COMPARISON TOLERANCES (inexact component types only)
# =============================================================================
REL_TOL = 1e-9             # Relative tolerance for isclose()
ABS_TOL = 1e-12            # Absolute tolerance, governs comparisons against zero
UNIT_TOLERANCE = 1e-8      # Acceptable |q| - 1 deviation for is_unit()
