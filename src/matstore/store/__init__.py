"""matstore Store Module.

Read-only matrix stores and the LogicalBuilder algebra that composes them.

Type Hierarchy:

    ElementsSupplier (ABC)
    ├── LogicalBuilder                # Chainable composer (single current store)
    ├── MatrixProductSupplier         # Deferred left @ right
    └── MatrixStore (ABC)             # Read-only 2D contract + default algebra
        ├── ZeroStore, IdentityStore, SingleStore, WrapperStore   # Leaves
        ├── DenseStore                # Materialized, mutable (ElementsConsumer)
        ├── AboveBelowStore, LeftRightStore                       # Concatenation
        ├── TransposedStore, ConjugatedStore                      # Self-inverse views
        ├── OffsetStore, LimitStore, RowsStore, ColumnsStore      # Windowing/selection
        ├── SuperimposedStore                                     # Overlay
        └── Upper/Lower Triangular, Hessenberg, Hermitian stores  # Masks

Quick Start:
    >>> from matstore.store import PRIMITIVE
    >>> a = PRIMITIVE.make_wrapper([[1.0, 2.0], [3.0, 4.0]]).get()
    >>> c = a.logical().below(PRIMITIVE.make_identity(2).get()).get()
    >>> c.shape
    (4, 2)
    >>> dense = c.copy()   # the only eager operation

Key Functions:
    - get_factory: Factory for a scalar kind (or the configured default)
    - build_row, build_column: Zero-padded block assembly
    - as_access1d: Adapt sequences for premultiply/multiply_both
"""

# =============================================================================
# Contract
# =============================================================================
from ._access import (
    Access1D,
    SliceAccess,
    SequenceAccess,
    as_access1d,
)

from ._supplier import (
    ElementsSupplier,
    ElementsConsumer,
    MatrixProductSupplier,
)

from ._base import (
    MatrixStore,
    ViewKind,
)

# =============================================================================
# Leaves and Physical Storage
# =============================================================================
from ._leaf import (
    ZeroStore,
    IdentityStore,
    SingleStore,
    WrapperStore,
)

from ._physical import DenseStore

# =============================================================================
# Decorators
# =============================================================================
from ._concat import (
    AboveBelowStore,
    LeftRightStore,
)

from ._transform import (
    TransposedStore,
    ConjugatedStore,
    OffsetStore,
    LimitStore,
    RowsStore,
    ColumnsStore,
    SuperimposedStore,
)

from ._mask import (
    UpperTriangularStore,
    LowerTriangularStore,
    UpperHessenbergStore,
    LowerHessenbergStore,
    UpperHermitianStore,
    LowerHermitianStore,
)

# =============================================================================
# Builder and Factories
# =============================================================================
from ._builder import (
    LogicalBuilder,
    build_row,
    build_column,
)

from ._factory import (
    StoreFactory,
    BIG,
    COMPLEX,
    PRIMITIVE,
    get_factory,
)

__all__ = [
    # Contract
    'Access1D',
    'SliceAccess',
    'SequenceAccess',
    'as_access1d',
    'ElementsSupplier',
    'ElementsConsumer',
    'MatrixProductSupplier',
    'MatrixStore',
    'ViewKind',

    # Leaves
    'ZeroStore',
    'IdentityStore',
    'SingleStore',
    'WrapperStore',
    'DenseStore',

    # Decorators
    'AboveBelowStore',
    'LeftRightStore',
    'TransposedStore',
    'ConjugatedStore',
    'OffsetStore',
    'LimitStore',
    'RowsStore',
    'ColumnsStore',
    'SuperimposedStore',
    'UpperTriangularStore',
    'LowerTriangularStore',
    'UpperHessenbergStore',
    'LowerHessenbergStore',
    'UpperHermitianStore',
    'LowerHermitianStore',

    # Builder and factories
    'LogicalBuilder',
    'build_row',
    'build_column',
    'StoreFactory',
    'BIG',
    'COMPLEX',
    'PRIMITIVE',
    'get_factory',
]
