from typing import List

from .common import features

if not features.std:
    raise ImportError("moore_neighborhood.dynamic requires the 'std' feature")

from .generic_dimension import moore as _moore_tensor


def moore(dim: int, radius: int) -> List[List[int]]:
    """Moore neighborhood with run-time dimension and radius.
    Args:
        dim: number of axes
        radius: maximum per-axis displacement from the center
    Returns:
        neighbors: ((2 * radius + 1) ** dim - 1) lists of dim ints,
        axis 0 varying fastest, the all-zero center excluded.

    >>> moore(2, 1)
    [[-1, -1], [0, -1], [1, -1], [-1, 0], [1, 0], [-1, 1], [0, 1], [1, 1]]
    """
    return _moore_tensor(dim, radius).tolist()
