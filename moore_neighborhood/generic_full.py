from typing import Optional, Union

import torch

from .common import _check_dim_radius, _fill_offsets

SIGNED_INT_DTYPES = (torch.int8, torch.int16, torch.int32, torch.int64)


def _write_offsets(dim: int, radius: int, length: int, out: torch.Tensor) -> None:
    assert len(out.shape) == 2 and out.shape[1] == dim, "out shape mismatch"
    assert out.shape[0] >= length, "out is too short for the neighborhood"
    assert out.dtype in SIGNED_INT_DTYPES, "out must be a signed integer tensor"
    assert radius <= torch.iinfo(out.dtype).max, "radius overflows the dtype of out"

    _fill_offsets(out, dim, radius, length)


def moore_prealloc(dim: int, radius: int, out: torch.Tensor) -> int:
    """Write the Moore neighborhood into a caller-provided buffer.
    No output tensor is allocated. Rows past the neighborhood are left untouched.
    Args:
        dim: number of axes
        radius: maximum per-axis displacement from the center
        out: (L, dim) integer tensor with L >= (2 * radius + 1) ** dim - 1
    Returns:
        length: number of rows written
    """
    length = _check_dim_radius(dim, radius)
    _write_offsets(dim, radius, length, out)
    return length


def moore(
    dim: int,
    radius: int,
    length: Optional[int] = None,
    device: Union[str, torch.device] = torch.device("cpu"),
) -> torch.Tensor:
    """Moore neighborhood with both dimension and radius fixed by the caller.
    The size is derived from (dim, radius); a stated length must agree with it.
    Args:
        dim: number of axes
        radius: maximum per-axis displacement from the center
        length: expected number of offsets, checked against the derived size
        device: device of the returned tensor
    Returns:
        offsets: (length, dim) long tensor
    """
    derived = _check_dim_radius(dim, radius)
    if length is not None:
        assert (
            length == derived
        ), f"length {length} does not match (2 * {radius} + 1) ** {dim} - 1 = {derived}"

    neighbors = torch.zeros((derived, dim), dtype=torch.long, device=device)
    _write_offsets(dim, radius, derived, neighbors)
    return neighbors
