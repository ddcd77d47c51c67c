"""
Value types for points, lines and slope/intercept results
"""

import numpy as np
from .core import UNBOUNDED, require


class Point2D:
    """Immutable point in the plane"""

    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        """
        Create a Point2D

        Parameters:
        -----------
        x, y : int, float or NumPy scalar
            Coordinates. Widened to double precision; a float32 input keeps
            its single-precision value exactly.
        """
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))

    @classmethod
    def from_array(cls, arr):
        """Create a Point2D from an array-like of shape (2,)"""
        arr = np.asarray(arr)
        if arr.shape != (2,):
            raise ValueError("Point must be a 2D point")
        return cls(arr[0], arr[1])

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @property
    def is_unbounded(self):
        """True for the sentinel returned when two lines have no unique intersection"""
        return self._x == UNBOUNDED and self._y == UNBOUNDED

    def to_numpy(self):
        """Get the point as a float64 NumPy array [x, y]"""
        return np.array([self._x, self._y], dtype=np.float64)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Point2D):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __reduce__(self):
        return (Point2D, (self._x, self._y))

    def __repr__(self):
        return f"Point2D(x={self._x!r}, y={self._y!r})"


class Line:
    """Ordered pair of points (start, end) defining an infinite line"""

    __slots__ = ("_start", "_end")

    def __init__(self, start=None, end=None):
        """
        Create a Line

        Parameters:
        -----------
        start, end : Point2D, array-like of shape (2,) or None
            Endpoints. Missing endpoints are kept so the operations in
            planelines.lines can reject them.
        """
        object.__setattr__(self, "_start", _as_point(start))
        object.__setattr__(self, "_end", _as_point(end))

    @classmethod
    def from_coordinates(cls, x1, y1, x2, y2):
        """Create a Line from four coordinates (x1, y1) -> (x2, y2)"""
        return cls(Point2D(x1, y1), Point2D(x2, y2))

    @property
    def start(self):
        return self._start

    @property
    def end(self):
        return self._end

    def to_numpy(self):
        """
        Get the line as a float64 NumPy array

        Returns:
        --------
        ndarray, shape (2, 2)
            Rows are start and end as [x, y]
        """
        require(start=self._start, end=self._end)
        return np.vstack([self._start.to_numpy(), self._end.to_numpy()])

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self):
        return hash((self._start, self._end))

    def __reduce__(self):
        return (Line, (self._start, self._end))

    def __repr__(self):
        return f"Line(start={self._start!r}, end={self._end!r})"


class SlopeIntercept:
    """Immutable (slope, y-intercept) pair"""

    __slots__ = ("_slope", "_y_intercept")

    def __init__(self, slope, y_intercept):
        object.__setattr__(self, "_slope", float(slope))
        object.__setattr__(self, "_y_intercept", float(y_intercept))

    @property
    def slope(self):
        return self._slope

    @property
    def y_intercept(self):
        return self._y_intercept

    @property
    def is_vertical(self):
        """True when the line is vertical and the intercept is the sentinel"""
        return self._y_intercept == UNBOUNDED

    def __iter__(self):
        yield self._slope
        yield self._y_intercept

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, SlopeIntercept):
            return NotImplemented
        return self._slope == other._slope and self._y_intercept == other._y_intercept

    def __hash__(self):
        return hash((self._slope, self._y_intercept))

    def __reduce__(self):
        return (SlopeIntercept, (self._slope, self._y_intercept))

    def __repr__(self):
        return f"SlopeIntercept(slope={self._slope!r}, y_intercept={self._y_intercept!r})"


def _as_point(value):
    if value is None or isinstance(value, Point2D):
        return value
    return Point2D.from_array(value)
