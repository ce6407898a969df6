"""Integer coordinate algebra for hexagonal grids."""

from .areas import (
    HexLine,
    HexRange,
    directions_to,
    hex_range,
    lerp,
    line_to,
    range_count,
    wrap_in_range,
    wrap_with,
    wraparound_mirrors,
)
from .config import WraparoundSettings
from .conversions import (
    Doubled,
    DoubledLayout,
    Offset,
    OffsetLayout,
    from_doubled,
    from_offset,
    to_doubled,
    to_offset,
)
from .coords import ONE, ORIGIN, X_AXIS, Y_AXIS, Z_AXIS, ZERO, Hex, hex_round
from .directions import (
    DIAGONAL_COORDS,
    NEIGHBOR_COORDS,
    DiagonalDirection,
    Direction,
    diagonal_coord,
    neighbor_coord,
)
from .errors import HexInvariantError, WraparoundError
from .metrics import (
    all_diagonals,
    all_neighbors,
    diagonal_neighbor,
    diagonal_to,
    direction_to,
    distance_to,
    length,
    neighbor,
    neighbor_direction,
    ulength,
    unsigned_distance_to,
)
from .serialization import HexModel
from .transforms import (
    left,
    left_around,
    reflect_x,
    reflect_y,
    reflect_z,
    right,
    right_around,
    rotate_left,
    rotate_left_around,
    rotate_right,
    rotate_right_around,
)

__version__ = "0.1.0"

__all__ = [
    "DIAGONAL_COORDS",
    "DiagonalDirection",
    "Direction",
    "Doubled",
    "DoubledLayout",
    "Hex",
    "HexInvariantError",
    "HexLine",
    "HexModel",
    "HexRange",
    "NEIGHBOR_COORDS",
    "ONE",
    "ORIGIN",
    "Offset",
    "OffsetLayout",
    "WraparoundError",
    "WraparoundSettings",
    "X_AXIS",
    "Y_AXIS",
    "ZERO",
    "Z_AXIS",
    "all_diagonals",
    "all_neighbors",
    "diagonal_coord",
    "diagonal_neighbor",
    "diagonal_to",
    "direction_to",
    "directions_to",
    "distance_to",
    "from_doubled",
    "from_offset",
    "hex_range",
    "hex_round",
    "left",
    "left_around",
    "length",
    "lerp",
    "line_to",
    "neighbor",
    "neighbor_coord",
    "neighbor_direction",
    "range_count",
    "reflect_x",
    "reflect_y",
    "reflect_z",
    "right",
    "right_around",
    "rotate_left",
    "rotate_left_around",
    "rotate_right",
    "rotate_right_around",
    "to_doubled",
    "to_offset",
    "ulength",
    "unsigned_distance_to",
    "wrap_in_range",
    "wrap_with",
    "wraparound_mirrors",
]
