"""
Global configuration for matstore.

Provides:
- Default scalar backend used by ``get_factory()``
- Relative tolerance used by ``MatrixStore.is_small()``

Both can be preset from the environment:

    MATSTORE_DEFAULT_SCALAR   primitive | complex | big (or an alias)
    MATSTORE_SMALL_EPSILON    float, e.g. 1e-12
"""

from __future__ import annotations

import logging
import os
from typing import Union

from ._scalar import ScalarKind

logger = logging.getLogger("matstore.config")

_DEFAULT_SCALAR = ScalarKind.PRIMITIVE
_DEFAULT_SMALL_EPSILON = 1e-12


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.
    """

    def __init__(self):
        self._default_scalar = _DEFAULT_SCALAR
        self._small_epsilon = _DEFAULT_SMALL_EPSILON
        self._load_environment()

    def _load_environment(self) -> None:
        scalar = os.environ.get("MATSTORE_DEFAULT_SCALAR")
        if scalar:
            try:
                self._default_scalar = ScalarKind.from_name(scalar)
            except ValueError:
                logger.warning(f"Ignoring MATSTORE_DEFAULT_SCALAR={scalar!r}: unknown scalar kind")

        epsilon = os.environ.get("MATSTORE_SMALL_EPSILON")
        if epsilon:
            try:
                self.small_epsilon = float(epsilon)
            except ValueError:
                logger.warning(f"Ignoring MATSTORE_SMALL_EPSILON={epsilon!r}: not a positive float")

    @property
    def default_scalar(self) -> ScalarKind:
        """Get default scalar backend."""
        return self._default_scalar

    @default_scalar.setter
    def default_scalar(self, value: Union[ScalarKind, str]):
        """Set default scalar backend."""
        if isinstance(value, str):
            value = ScalarKind.from_name(value)
        self._default_scalar = value

    @property
    def small_epsilon(self) -> float:
        """Relative tolerance for ``is_small`` checks."""
        return self._small_epsilon

    @small_epsilon.setter
    def small_epsilon(self, value: float):
        value = float(value)
        if not value > 0.0:
            raise ValueError(f"small_epsilon must be positive, got {value}")
        self._small_epsilon = value


# Global config instance
_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_default_scalar(kind: Union[ScalarKind, str]) -> None:
    """
    Set the scalar backend used when no factory is named.

    Example:
        >>> matstore.set_default_scalar('complex')
        >>> builder = matstore.get_factory().make_identity(3)  # complex identity
    """
    _config.default_scalar = kind


def get_default_scalar() -> ScalarKind:
    """Get the scalar backend used when no factory is named."""
    return _config.default_scalar


def reset_config() -> None:
    """Restore built-in defaults (environment overrides are not re-read)."""
    _config._default_scalar = _DEFAULT_SCALAR
    _config._small_epsilon = _DEFAULT_SMALL_EPSILON
