import configargparse
import torch
from torch.utils import benchmark
from tqdm import tqdm

import moore_neighborhood
from moore_neighborhood import generic_full

CASES = [(3, 1), (2, 1), (2, 2)]


def time_entry_points(dim, radius, min_run_time):
    """Measurements for every exported entry point at a given (dim, radius)."""
    stmts = {
        "generic_full": "generic_full.moore(dim, radius, length)",
        "prealloc": "generic_full.moore_prealloc(dim, radius, out)",
    }
    if moore_neighborhood.features.std:
        stmts["dynamic"] = "moore_neighborhood.dynamic.moore(dim, radius)"
        stmts["generic_dimension"] = "moore_neighborhood.generic_dimension.moore(dim, radius)"

    length = moore_neighborhood.neighborhood_size(dim, radius)
    env = {
        "moore_neighborhood": moore_neighborhood,
        "generic_full": generic_full,
        "dim": dim,
        "radius": radius,
        "length": length,
        "out": torch.empty((length, dim), dtype=torch.long),
    }

    results = []
    for name, stmt in stmts.items():
        timer = benchmark.Timer(
            stmt=stmt,
            globals=env,
            label="moore neighborhood",
            sub_label=f"d={dim}, r={radius}",
            description=name,
        )
        results.append(timer.blocked_autorange(min_run_time=min_run_time))
    return results


if __name__ == "__main__":
    parser = configargparse.ArgParser()
    # fmt: off
    parser.add_argument("-c", "--config", is_config_file=True, help="config file path")
    parser.add_argument("--dim", type=int, action="append", help="benchmark only these dims (with --radius)")
    parser.add_argument("--radius", type=int, action="append", help="benchmark only these radii (with --dim)")
    parser.add_argument("--min_run_time", type=float, default=0.2)
    parser.add_argument("--macro", action="store_true", help="also time moore(2, 2)")
    # fmt: on
    args = parser.parse_args()

    if args.dim is not None or args.radius is not None:
        assert args.dim is not None and args.radius is not None, "set both --dim and --radius"
        assert len(args.dim) == len(args.radius), "--dim and --radius must pair up"
        cases = list(zip(args.dim, args.radius))
    else:
        cases = CASES

    results = []
    for dim, radius in tqdm(cases):
        results += time_entry_points(dim, radius, args.min_run_time)

    if args.macro:
        timer = benchmark.Timer(
            stmt="moore(2, 2)",
            globals={"moore": moore_neighborhood.moore},
            label="moore neighborhood",
            sub_label="d=2, r=2",
            description="macro",
        )
        results.append(timer.blocked_autorange(min_run_time=args.min_run_time))

    benchmark.Compare(results).print()
