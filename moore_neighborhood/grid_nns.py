from typing import Tuple, Callable, Union

import torch

from . import generic_full


def enumerate_neighbor_coord_offsets(
    dim: int, radius: int, device: Union[str, torch.device] = torch.device("cpu")
) -> Tuple[torch.Tensor, Callable[[torch.Tensor], torch.Tensor]]:
    """Generate Moore neighbor coordinate offsets and their inverse lookup.
    This function is independent of the choice of grid or cell.
    In the 1-radius 2D case the offsets are the 3x3 block in raster order
    without the center, i.e. (-1, -1), (0, -1), (1, -1), (-1, 0), (1, 0), ...
    Args:
        dim: dimension of the coordinate
        radius: radius of the neighborhood
    Returns:
        idx2offset: ((2 * radius + 1) ** dim - 1, dim), enumerating
          [-r, -r, -r] -- [r, r, r] with x varying fastest, center excluded
        fn_offset2idx: maps (N, dim) offsets to (N,) rows of idx2offset,
          -1 for the center and for offsets outside the neighborhood
    """
    idx2offset = generic_full.moore(dim, radius, device=device)
    length = len(idx2offset)
    center = length // 2
    window = 2 * radius + 1

    def fn_offset2idx(offset: torch.Tensor) -> torch.Tensor:
        """
        offset: (N, dim)
        returns idx: (N,)
        """
        assert len(offset.shape) == 2 and offset.shape[1] == dim, "offset shape mismatch"
        offset = offset.long()

        if length == 0:
            return torch.full(
                (len(offset),), -1, dtype=torch.long, device=offset.device
            )

        idx = torch.zeros_like(offset[:, 0])
        for i in range(dim - 1, -1, -1):
            idx = (offset[:, i] + radius) + idx * window

        valid = (offset.abs() <= radius).all(dim=1) & (idx != center)
        idx = torch.where(idx > center, idx - 1, idx)
        return torch.where(valid, idx, torch.full_like(idx, -1))

    return idx2offset, fn_offset2idx
