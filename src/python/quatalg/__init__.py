"""
===============================================================================
QUATALG - Quaternion Algebra Library
===============================================================================
A quaternion value type generic over its numeric component type, with the
Hamilton product, conjugation, magnitude, normalization and a commutativity
test via the half commutator.

Modules:
    quaternion  -- Quaternion value type and its operation set
    numeric     -- Per-type comparison, sqrt, division and constant conversion
    config      -- Floating-point tolerance configuration (YAML loadable)
    constants   -- Default tolerances and algebraic constants
===============================================================================
"""

import logging

from quatalg.config import (
    ToleranceConfig,
    get_config,
    load_config,
    set_config,
    tolerance_override,
)
from quatalg.quaternion import Quaternion

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Quaternion",
    "ToleranceConfig",
    "get_config",
    "load_config",
    "set_config",
    "tolerance_override",
]
