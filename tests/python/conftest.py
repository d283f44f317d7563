"""
Pytest configuration and shared fixtures for matstore tests.
"""

import pytest
import numpy as np
from pathlib import Path
import sys

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

import matstore
from matstore import BIG, COMPLEX, PRIMITIVE


# Try to import scipy
try:
    import scipy.sparse as sp
    HAS_SCIPY = True
except ImportError:
    HAS_SCIPY = False


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def requires_scipy():
    """Skip test if scipy is not available."""
    if not HAS_SCIPY:
        pytest.skip("scipy not available")


@pytest.fixture(autouse=True)
def clean_config():
    """Restore global configuration after every test."""
    yield
    matstore.reset_config()


@pytest.fixture
def dense_small():
    """Reference 3x4 array.

    Matrix:
    [[1, 0, 2, 0],
     [0, 3, 0, 4],
     [5, 0, 0, 6]]
    """
    return np.array([
        [1.0, 0.0, 2.0, 0.0],
        [0.0, 3.0, 0.0, 4.0],
        [5.0, 0.0, 0.0, 6.0],
    ])


@pytest.fixture
def small_store(dense_small):
    """PRIMITIVE wrapper over dense_small."""
    return PRIMITIVE.make_wrapper(dense_small).get()


@pytest.fixture
def square_array():
    """4x4 array with distinct entries 1..16 (row-major)."""
    return np.arange(1.0, 17.0).reshape(4, 4)


@pytest.fixture
def square_store(square_array):
    return PRIMITIVE.make_wrapper(square_array).get()


@pytest.fixture
def complex_array():
    return np.array([
        [1 + 1j, 2 - 1j, 0 + 3j],
        [4 + 0j, 5 + 2j, 6 - 6j],
        [7 - 2j, 0 + 0j, 9 + 1j],
    ])


@pytest.fixture
def complex_store(complex_array):
    return COMPLEX.make_wrapper(complex_array).get()


@pytest.fixture
def identity10():
    return PRIMITIVE.make_identity(10).get()


@pytest.fixture(params=["BIG", "COMPLEX", "PRIMITIVE"])
def any_factory(request):
    """Each scalar backend in turn."""
    return {"BIG": BIG, "COMPLEX": COMPLEX, "PRIMITIVE": PRIMITIVE}[request.param]


# =============================================================================
# Helper Functions
# =============================================================================

def store_to_array(store):
    """Element-by-element read of a store into a complex-safe ndarray."""
    out = np.empty(store.shape, dtype=np.complex128)
    for i in range(store.rows):
        for j in range(store.cols):
            out[i, j] = complex(store.get(i, j))
    return out


def assert_store_equal(store, expected, rtol=1e-12, atol=1e-12):
    """Assert a store matches an array, reading through get(row, col)."""
    expected = np.asarray(expected, dtype=np.complex128)
    assert store.shape == expected.shape
    np.testing.assert_allclose(store_to_array(store), expected, rtol=rtol, atol=atol)


def assert_hints_conservative(store):
    """Structural hints never exclude a nonzero element."""
    values = store_to_array(store)
    for j in range(store.cols):
        nonzero = np.nonzero(values[:, j])[0]
        first = store.first_in_column(j)
        limit = store.limit_of_column(j)
        if nonzero.size:
            assert first <= nonzero[0], f"first_in_column({j})={first}"
            assert limit >= nonzero[-1] + 1, f"limit_of_column({j})={limit}"
    for i in range(store.rows):
        nonzero = np.nonzero(values[i, :])[0]
        first = store.first_in_row(i)
        limit = store.limit_of_row(i)
        if nonzero.size:
            assert first <= nonzero[0], f"first_in_row({i})={first}"
            assert limit >= nonzero[-1] + 1, f"limit_of_row({i})={limit}"
