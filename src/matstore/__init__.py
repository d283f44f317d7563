"""
matstore - Logical Matrix Stores

Zero-copy, composable views over two-dimensional numeric data:
- Read-only MatrixStore contract with default algebra (add, multiply, norm)
- LogicalBuilder for transpose, conjugate, masking, concatenation,
  windowing, selection and overlay without copying data
- Three scalar backends: PRIMITIVE (float), COMPLEX, BIG (Decimal)

Architecture:
    ┌──────────────────────────────────────────────┐
    │   LogicalBuilder  (one current store)        │
    ├──────────────────────────────────────────────┤
    │   Decorators: concat | remap | mask          │
    ├──────────────────────────────────────────────┤
    │   Leaves: Zero | Identity | Single | Wrapper │
    └──────────────────────────────────────────────┘

Example:
    >>> import matstore
    >>> from matstore import PRIMITIVE
    >>>
    >>> eye = PRIMITIVE.make_identity(3).get()
    >>> upper = eye.logical().below(2).triangular(True, False).get()
    >>> upper.shape
    (5, 3)
    >>>
    >>> # Materialize when needed
    >>> dense = upper.copy()
"""

import logging

__version__ = '0.1.0'

from . import store

from ._config import (
    get_config,
    set_default_scalar,
    get_default_scalar,
    reset_config,
)

from ._error import (
    MatStoreError,
    ProgrammingError,
    InvalidArgumentError,
    DimensionMismatchError,
    IndexOutOfBoundsError,
    ScalarTypeMismatchError,
)

from ._scalar import ScalarKind

from .store import (
    Access1D,
    ElementsConsumer,
    ElementsSupplier,
    MatrixStore,
    DenseStore,
    LogicalBuilder,
    ViewKind,
    StoreFactory,
    BIG,
    COMPLEX,
    PRIMITIVE,
    get_factory,
)

logging.getLogger("matstore").addHandler(logging.NullHandler())

__all__ = [
    # Version
    '__version__',

    # Modules
    'store',

    # Configuration
    'get_config',
    'set_default_scalar',
    'get_default_scalar',
    'reset_config',

    # Errors
    'MatStoreError',
    'ProgrammingError',
    'InvalidArgumentError',
    'DimensionMismatchError',
    'IndexOutOfBoundsError',
    'ScalarTypeMismatchError',

    # Core types
    'ScalarKind',
    'Access1D',
    'ElementsConsumer',
    'ElementsSupplier',
    'MatrixStore',
    'DenseStore',
    'LogicalBuilder',
    'ViewKind',
    'StoreFactory',

    # Factories
    'BIG',
    'COMPLEX',
    'PRIMITIVE',
    'get_factory',
]
