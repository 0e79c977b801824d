import numpy as np
from numpy.typing import NDArray
from scipy import linalg

# scipy.linalg re-exports numpy's LinAlgError, so both spellings catch it.
InversionError = linalg.LinAlgError


def solve_inverse(
    matrix: NDArray,
    rhs: NDArray | None = None,
    **options,
) -> NDArray:
    """
    solves `matrix @ solution = rhs`

    With the default `rhs` (the identity) the solution is the inverse of
    `matrix`. Any `options` go to `scipy.linalg.solve` untouched.

    Raises:
    - InversionError: if `matrix` is not square or is singular.
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InversionError(
            f"expected a square matrix, got shape {matrix.shape}"
        )

    if rhs is None:
        rhs = np.identity(matrix.shape[0])

    return linalg.solve(matrix, rhs, **options)
