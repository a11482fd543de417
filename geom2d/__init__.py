"""2D geometry kernel: points, affine transforms, rays, segments and Bezier curves."""

from .affine import Affine
from .bezier import BezierCurve, LineSegment
from .curve import Curve, CurveKind, RootKind, Roots
from .errors import (
    DegenerateVectorError,
    GeometryError,
    InfiniteSolutionsError,
    RangeError,
)
from .intersections import Intersection, intersect
from .numeric import (
    TolerancePolicy,
    get_tolerance,
    nearly_equal,
    on_tolerance_changed,
    set_tolerance,
    tolerance,
)
from .point import (
    X,
    Y,
    Dim2,
    Point,
    as_point,
    cross,
    distance_sq,
    dot,
    lerp,
    middle_point,
    unit_vector,
)
from .queries import (
    angle_between,
    are_near,
    are_same,
    distance,
    make_angle_bisector_ray,
    nearest_point_on,
    offset_between_points,
    snap_vector_midpoint,
    solve_roots,
)
from .ray import Ray

__all__ = [
    "Affine",
    "BezierCurve",
    "LineSegment",
    "Curve",
    "CurveKind",
    "RootKind",
    "Roots",
    "GeometryError",
    "InfiniteSolutionsError",
    "RangeError",
    "DegenerateVectorError",
    "Intersection",
    "intersect",
    "TolerancePolicy",
    "get_tolerance",
    "set_tolerance",
    "on_tolerance_changed",
    "tolerance",
    "nearly_equal",
    "Dim2",
    "X",
    "Y",
    "Point",
    "as_point",
    "dot",
    "cross",
    "distance_sq",
    "lerp",
    "middle_point",
    "unit_vector",
    "Ray",
    "distance",
    "are_near",
    "are_same",
    "angle_between",
    "make_angle_bisector_ray",
    "nearest_point_on",
    "solve_roots",
    "offset_between_points",
    "snap_vector_midpoint",
]
