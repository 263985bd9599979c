from typing import Callable, Union

import torch

from .common import features, _check_dim_radius, _fill_offsets

if not features.std:
    raise ImportError("moore_neighborhood.generic_dimension requires the 'std' feature")


def moore(
    dim: int,
    radius: int,
    device: Union[str, torch.device] = torch.device("cpu"),
) -> torch.Tensor:
    """Moore neighborhood as a tensor of fixed-length rows.
    Args:
        dim: number of axes, i.e. the row length
        radius: maximum per-axis displacement from the center
        device: device of the returned tensor
    Returns:
        offsets: (N, dim) long tensor, N = (2 * radius + 1) ** dim - 1
    """
    length = _check_dim_radius(dim, radius)

    neighbors = torch.empty((length, dim), dtype=torch.long, device=device)
    _fill_offsets(neighbors, dim, radius, length)
    return neighbors


def bind(dim: int) -> Callable[..., torch.Tensor]:
    """Fix the dimension ahead of time, leaving the radius dynamic.

    >>> moore_3d = bind(3)
    >>> moore_3d(1).shape
    torch.Size([26, 3])
    """
    assert (
        isinstance(dim, int) and not isinstance(dim, bool) and dim >= 0
    ), "dim must be non-negative"

    def fn_moore(
        radius: int, device: Union[str, torch.device] = torch.device("cpu")
    ) -> torch.Tensor:
        return moore(dim, radius, device)

    fn_moore.dim = dim
    return fn_moore
