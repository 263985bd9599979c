import os
import warnings

import torch

KNOWN_FEATURES = {"std", "no_std"}


class DotDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def _get_features() -> DotDict:
    """Read the enabled feature set from MOORE_FEATURES (comma separated).
    Without the 'std' feature, only the preallocated entry points are exported.
    """
    names = os.environ.get("MOORE_FEATURES", "std")
    enabled = {name.strip() for name in names.split(",") if name.strip()}

    unknown = enabled - KNOWN_FEATURES
    if len(unknown) > 0:
        warnings.warn(f"Unknown features in MOORE_FEATURES ignored: {sorted(unknown)}")

    return DotDict(std="std" in enabled and "no_std" not in enabled)


features = _get_features()


def neighborhood_size(dim: int, radius: int) -> int:
    """Number of offsets in the Moore neighborhood, center excluded.
    (2 * radius + 1) ** dim - 1, which is 0 for dim == 0 or radius == 0.
    """
    return (2 * radius + 1) ** dim - 1


def _check_dim_radius(dim: int, radius: int) -> int:
    assert (
        isinstance(dim, int) and not isinstance(dim, bool) and dim >= 0
    ), "dim must be non-negative"
    assert (
        isinstance(radius, int) and not isinstance(radius, bool) and radius >= 0
    ), "radius must be non-negative"

    length = neighborhood_size(dim, radius)
    if length == 0:
        warnings.warn("empty neighborhood")
    return length


def _fill_offsets(out: torch.Tensor, dim: int, radius: int, length: int) -> None:
    """Decode odometer indices into offsets, written to out[:length].
    Axis 0 is the least significant digit. The center sits at index length // 2
    and is skipped by shifting every later index by one.
    """
    if length == 0:
        return

    window = 2 * radius + 1
    indices = torch.arange(length, dtype=torch.long, device=out.device)
    indices[length // 2 :] += 1

    for axis in range(dim):
        out[:length, axis] = indices % window - radius
        indices = torch.div(indices, window, rounding_mode="floor")
