"""
cg2d — мінімальне ядро 2D обчислювальної геометрії.
Інкрементальна опукла оболонка над змінним предикатом орієнтації:
наївним (float) або робастним (фільтр похибки + точна арифметика).
"""

__version__ = "0.1.0"

from cg2d.errors import HullError, InsufficientInputError, DegenerateInputError, InvalidGeometryError
from cg2d.geom import Pt, as_pt, signed_area2, parse_points
from cg2d.predicates import (
    Orient2D, orient2d_naive, orient2d_robust, sign, get_predicate, sign_grid, PREDICATES,
)
from cg2d.hull import IncrementalHull2D, convex_hull

__all__ = [
    "Pt", "as_pt", "signed_area2", "parse_points",
    "Orient2D", "orient2d_naive", "orient2d_robust", "sign", "get_predicate", "sign_grid", "PREDICATES",
    "IncrementalHull2D", "convex_hull",
    "HullError", "InsufficientInputError", "DegenerateInputError", "InvalidGeometryError",
    "__version__",
]
