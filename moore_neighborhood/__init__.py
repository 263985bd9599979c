from .common import DotDict, features, neighborhood_size
from . import generic_full
from .generic_full import moore_prealloc
from .macro import moore
from .grid_nns import enumerate_neighbor_coord_offsets

if features.std:
    from . import dynamic, generic_dimension

__version__ = "0.1.0"
