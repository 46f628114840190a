"""
===============================================================================
QUATALG - Tolerance Configuration
===============================================================================
Process-wide settings for the floating-point comparison strategy used by
quatalg.numeric. Exact component types (int, Fraction) ignore these values
entirely; they always compare with ==.

Configuration can be loaded from a YAML file of the form:

    tolerance:
      rel_tol: 1.0e-9
      abs_tol: 1.0e-12
      unit_tolerance: 1.0e-8
===============================================================================
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Iterator, Union

import yaml

from quatalg.constants import ABS_TOL, REL_TOL, UNIT_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Tolerances applied when comparing inexact (floating-point) components.

    Attributes
    ----------
    rel_tol : float
        Relative tolerance, as in math.isclose.
    abs_tol : float
        Absolute tolerance. This is what decides whether a float component
        counts as zero (e.g. in Quaternion.exchangeable).
    unit_tolerance : float
        Acceptable deviation of |q| from 1.0 in Quaternion.is_unit.
    """
    rel_tol: float = REL_TOL
    abs_tol: float = ABS_TOL
    unit_tolerance: float = UNIT_TOLERANCE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(
                    f"Tolerance '{f.name}' must be a number, got {value!r}"
                )
            if value < 0.0:
                raise ValueError(
                    f"Tolerance '{f.name}' must be non-negative, got {value}"
                )


_active_config = ToleranceConfig()


def get_config() -> ToleranceConfig:
    """Return the active tolerance configuration."""
    return _active_config


def set_config(config: ToleranceConfig) -> None:
    """Replace the active tolerance configuration."""
    global _active_config
    if not isinstance(config, ToleranceConfig):
        raise TypeError(f"Expected ToleranceConfig, got {type(config).__name__}")
    _active_config = config
    logger.debug("Active tolerance configuration set to %s", config)


def load_config(config_path: Union[str, Path]) -> ToleranceConfig:
    """
    Load a tolerance configuration from a YAML file.

    Args:
        config_path: Path to a YAML file. An empty file or one without a
            'tolerance' section yields the defaults.

    Returns:
        The parsed ToleranceConfig. It is NOT activated; pass it to
        set_config() to make it the process-wide default.

    Raises:
        ValueError: If the file is not a mapping, the 'tolerance' section is
            not a mapping, or it contains unknown keys or invalid values.
    """
    logger.info("Loading tolerance configuration from: %s", config_path)
    with open(config_path, 'r') as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return ToleranceConfig()
    if not isinstance(raw, dict):
        raise ValueError(
            f"Configuration root must be a mapping, got {type(raw).__name__}"
        )

    section = raw.get('tolerance') or {}
    if not isinstance(section, dict):
        raise ValueError("'tolerance' section must be a mapping")

    known = {f.name for f in fields(ToleranceConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown tolerance keys: {', '.join(unknown)}")

    return ToleranceConfig(**section)


@contextmanager
def tolerance_override(**overrides) -> Iterator[ToleranceConfig]:
    """
    Temporarily replace fields of the active configuration.

    >>> with tolerance_override(abs_tol=1e-6):
    ...     pass
    """
    previous = get_config()
    set_config(replace(previous, **overrides))
    try:
        yield get_config()
    finally:
        set_config(previous)
