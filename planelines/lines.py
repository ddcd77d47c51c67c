"""
Operations on lines in the Cartesian plane

Every function here is pure: it reads immutable Point2D/Line values and
returns a freshly built float, bool or value object.

# Degenerate results
Vertical lines have no finite y-intercept and parallel lines have no unique
intersection. Both cases return the finite sentinel `UNBOUNDED`
(the largest double) instead of raising:

>>> slope_intercept(Line((1, 3), (1, -2)))
SlopeIntercept(slope=0.0, y_intercept=1.7976931348623157e+308)

# Exact comparisons
Parallel and perpendicular tests compare against 0 and -1 exactly. Lines that
are only nearly parallel or nearly perpendicular are reported as neither.
"""

import math

from .core import UNBOUNDED, logger, require
from .models import Line, Point2D, SlopeIntercept


def require_line(line, name):
    """Check a line and both of its endpoints, return (start, end)"""
    require(**{name: line})
    if not isinstance(line, Line):
        raise TypeError(f"{name} must be a Line, got {type(line).__name__}")
    require(**{f"{name}.start": line.start, f"{name}.end": line.end})
    return line.start, line.end


def require_point(point, name):
    """Check a point argument, return it unchanged"""
    require(**{name: point})
    if not isinstance(point, Point2D):
        raise TypeError(f"{name} must be a Point2D, got {type(point).__name__}")
    return point


def distance(a, b):
    """
    Euclidean distance between two points

    Parameters:
    -----------
    a, b : Point2D

    Returns:
    --------
    float
        sqrt((bx - ax)^2 + (by - ay)^2)

    Raises:
    -------
    InvalidArgumentError
        If a or b is None

    Examples:
    ---------
    >>> distance(Point2D(1, 4), Point2D(-2, 3))
    3.1622776601683795
    """
    require_point(a, "a")
    require_point(b, "b")
    xdiff = b.x - a.x
    ydiff = b.y - a.y
    return math.sqrt(xdiff * xdiff + ydiff * ydiff)


def slope_intercept(a, b=None):
    """
    Slope and y-intercept of the line through two points

    Called with a single Line, uses its start and end.

    m = (y2 - y1) / (x2 - x1), and the intercept follows from y = m*x + b.

    Parameters:
    -----------
    a : Point2D or Line
        First point, or the whole line
    b : Point2D, optional
        Second point. Must be omitted when `a` is a Line.

    Returns:
    --------
    SlopeIntercept
        - vertical line: (0.0, UNBOUNDED)
        - horizontal line: (0.0, y)
        - otherwise: (m, m*x1 + (y1 - m*x1))

    Raises:
    -------
    InvalidArgumentError
        If the line or either point is None
    """
    if b is None and isinstance(a, Line):
        start, end = require_line(a, "line")
        return slope_intercept(start, end)

    require_point(a, "a")
    require_point(b, "b")

    x1, y1 = a.x, a.y
    xdiff = b.x - x1
    ydiff = b.y - y1

    if xdiff == 0:
        logger.debug("vertical line through x=%r, y-intercept is unbounded", x1)
        return SlopeIntercept(0.0, UNBOUNDED)

    if ydiff == 0:
        return SlopeIntercept(0.0, y1)

    m = ydiff / xdiff
    # b = y - m*x using the first point, then y = m*x + b
    intercept = y1 - m * x1
    y = m * x1 + intercept
    return SlopeIntercept(m, y)


def is_parallel(l1, l2):
    """
    Check whether two lines are parallel

    With a = dy and b = dx for each line, the lines are parallel iff the
    determinant a1*b2 - a2*b1 is exactly 0.

    Raises:
    -------
    InvalidArgumentError
        If either line or any of its endpoints is None
    """
    s1, e1 = require_line(l1, "l1")
    s2, e2 = require_line(l2, "l2")

    a1 = e1.y - s1.y
    b1 = e1.x - s1.x
    a2 = e2.y - s2.y
    b2 = e2.x - s2.x

    return a1 * b2 - a2 * b1 == 0


def is_perpendicular(l1, l2):
    """
    Check whether two lines are perpendicular

    Two vertical lines are never perpendicular. A vertical line is
    perpendicular only to a line of slope exactly 0. Otherwise the slopes
    must multiply to exactly -1.

    Raises:
    -------
    InvalidArgumentError
        If either line or any of its endpoints is None
    """
    s1, e1 = require_line(l1, "l1")
    s2, e2 = require_line(l2, "l2")

    x1diff = e1.x - s1.x
    y1diff = e1.y - s1.y
    x2diff = e2.x - s2.x
    y2diff = e2.y - s2.y

    if x1diff == 0 and x2diff == 0:
        return False

    if x1diff == 0:
        return y2diff / x2diff == 0

    if x2diff == 0:
        return y1diff / x1diff == 0

    m1 = y1diff / x1diff
    m2 = y2diff / x2diff
    return m1 * m2 == -1


def get_incident_point(l1, l2):
    """
    Intersection point of the infinite lines through l1 and l2

    Each line is written as a*x + b*y = c with
        a = y2 - y1,  b = x1 - x2,  c = a*x1 + b*y1
    and the 2x2 system is solved by Cramer's rule:
        d = a1*b2 - a2*b1
        x = (b2*c1 - b1*c2) / d
        y = (a1*c2 - a2*c1) / d

    The result is not restricted to the segments.

    Returns:
    --------
    Point2D
        Intersection, or Point2D(UNBOUNDED, UNBOUNDED) if the lines are
        parallel or coincident (d == 0)

    Raises:
    -------
    InvalidArgumentError
        If either line or any of its endpoints is None

    Examples:
    ---------
    >>> get_incident_point(Line((1, 1), (4, 4)), Line((1, 8), (2, 4)))
    Point2D(x=2.4, y=2.4)
    """
    s1, e1 = require_line(l1, "l1")
    s2, e2 = require_line(l2, "l2")

    a1 = e1.y - s1.y
    b1 = s1.x - e1.x
    c1 = a1 * s1.x + b1 * s1.y

    a2 = e2.y - s2.y
    b2 = s2.x - e2.x
    c2 = a2 * s2.x + b2 * s2.y

    determinant = a1 * b2 - a2 * b1

    if determinant == 0:
        logger.debug("lines %r and %r are parallel, no unique intersection", l1, l2)
        return Point2D(UNBOUNDED, UNBOUNDED)

    x = (b2 * c1 - b1 * c2) / determinant
    y = (a1 * c2 - a2 * c1) / determinant
    return Point2D(x, y)


# Names used by the original Lines API
get_distance = distance
get_slope_intercept = slope_intercept
