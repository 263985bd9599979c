from typing import Union

import torch

from . import generic_full
from .common import neighborhood_size


def moore(
    radius: int = 1,
    dim: int = 2,
    device: Union[str, torch.device] = torch.device("cpu"),
) -> torch.Tensor:
    """Shorthand for generic_full.moore with the size derived inline.
    moore() is the 3x3 block, moore(r) a 2D block of radius r, moore(r, d) the general case.
    """
    return generic_full.moore(
        dim, radius, length=neighborhood_size(dim, radius), device=device
    )
