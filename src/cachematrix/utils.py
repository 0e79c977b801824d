from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

RTOL = 0.0
ATOL = 1e-9


@dataclass
class InverseCheck:
    matrix: NDArray
    inverse: NDArray
    rtol: float = RTOL
    atol: float = ATOL

    def left_product(self) -> NDArray:
        return self.inverse @ self.matrix

    def right_product(self) -> NDArray:
        return self.matrix @ self.inverse

    def holds(self) -> bool:
        """ Both `matrix @ inverse` and `inverse @ matrix` are the identity
        within the tolerances. """
        identity = np.identity(self.matrix.shape[0])
        return all(
            np.allclose(product, identity, rtol=self.rtol, atol=self.atol)
            for product in (self.right_product(), self.left_product())
        )

    def __str__(self) -> str:
        lstr = f"{self.matrix=}\n"
        lstr += f"{self.inverse=}\n"
        lstr += f"{self.right_product()=}\n"
        return lstr


def check_inverse(
    matrix: NDArray,
    inverse: NDArray,
    rtol: float = RTOL,
    atol: float = ATOL,
) -> bool:
    if matrix.ndim != 2 or matrix.shape != inverse.shape[::-1]:
        return False
    return InverseCheck(matrix, inverse, rtol=rtol, atol=atol).holds()
