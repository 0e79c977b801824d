""" A matrix that caches its own inverse.

The inverse is calculated lazily by `cache_solve` and kept until the source
matrix is replaced. """

import logging
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from cachematrix.solvers import solve_inverse

logger = logging.getLogger(__name__)


class CachedMatrix:

    def __init__(self, source_matrix: NDArray | None = None) -> None:
        """
        Wrap a matrix so that it can cache its own inverse.

        :param source_matrix: the matrix whose inverse will be cached.
            Defaults to an empty 0x0 matrix.
        """
        if source_matrix is None:
            source_matrix = np.empty((0, 0))
        self.source_matrix = source_matrix
        self.inverse_matrix: NDArray | None = None

    def set_source_matrix(self, source_matrix: NDArray) -> None:
        """ Replace the source matrix and drop its cached inverse.

        The old and new matrices are never compared: even an identical
        matrix invalidates the cache. """
        self.source_matrix = source_matrix
        self.inverse_matrix = None

    def get_source_matrix(self) -> NDArray:
        return self.source_matrix

    def set_inverse_matrix(self, inverse_matrix: NDArray) -> None:
        """
        Store `inverse_matrix` as the cached inverse.

        Nothing is checked. The caller must make sure that this really is
        the inverse of the current source matrix.
        """
        self.inverse_matrix = inverse_matrix

    def get_inverse_matrix(self) -> NDArray | None:
        """ The cached inverse or `None` if it wasn't calculated yet.
        Use `cache_solve` to always get a matrix. """
        return self.inverse_matrix

    def has_inverse(self) -> bool:
        return self.get_inverse_matrix() is not None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shape={np.shape(self.source_matrix)}, "
            f"cached={self.has_inverse()})"
        )


def cache_solve(
    cache_matrix: CachedMatrix,
    *args: Any,
    solver: Callable[..., NDArray] = solve_inverse,
    **kwargs: Any,
) -> NDArray:
    """
    Provide the inverse of the source matrix held by `cache_matrix`.

    If the source matrix didn't change since the last calculation, the
    cached inverse is returned and `solver` is not called.

    Args:
    - cache_matrix (CachedMatrix): the wrapped matrix.
    - args, kwargs: passed as they are to `solver` after the source matrix.
    - solver (callable): `solver(matrix, *args, **kwargs)` returning the
      inverse. Defaults to `solve_inverse`.

    Returns:
    - the inverse matrix, also stored in `cache_matrix`.

    Errors raised by `solver` propagate and leave the cache empty.
    """
    inverse_matrix = cache_matrix.get_inverse_matrix()
    if inverse_matrix is not None:
        logger.info("getting cached inverse")
        return inverse_matrix

    source_matrix = cache_matrix.get_source_matrix()
    logger.debug("solving for the inverse of a %s matrix",
                 np.shape(source_matrix))
    inverse_matrix = solver(source_matrix, *args, **kwargs)
    cache_matrix.set_inverse_matrix(inverse_matrix)
    return inverse_matrix
