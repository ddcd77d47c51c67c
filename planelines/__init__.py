"""
planelines

Elementary planar geometry for lines defined by two points: Euclidean
distance, slope and y-intercept, parallel and perpendicular tests, and the
intersection point of two lines.

# Quick Start
```python
from planelines import Line, Point2D, distance, get_incident_point

distance(Point2D(1, 4), Point2D(-2, 3))        # 3.1622776601683795
get_incident_point(Line((1, 1), (4, 4)),
                   Line((1, 8), (2, 4)))       # Point2D(x=2.4, y=2.4)
```

# Features
- Immutable value types: Point2D, Line, SlopeIntercept
- Pure functions, safe to call from any thread
- Exact comparisons, no epsilon tolerance
- Degenerate cases reported with the finite sentinel UNBOUNDED
- NumPy conversion for points and lines
"""

from .core import UNBOUNDED, InvalidArgumentError
from .models import Point2D, Line, SlopeIntercept
from .lines import (
    distance,
    slope_intercept,
    is_parallel,
    is_perpendicular,
    get_incident_point,
    get_distance,
    get_slope_intercept,
)

__version__ = "0.1.0"
__all__ = [
    "UNBOUNDED",
    "InvalidArgumentError",
    "Point2D",
    "Line",
    "SlopeIntercept",
    "distance",
    "slope_intercept",
    "is_parallel",
    "is_perpendicular",
    "get_incident_point",
    "get_distance",
    "get_slope_intercept",
]
