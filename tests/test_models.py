#!/usr/bin/env python3
"""
Tests for the Point2D, Line and SlopeIntercept value types
"""

import copy
import pickle
import sys
import numpy as np
import pytest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from planelines import UNBOUNDED, InvalidArgumentError, Line, Point2D, SlopeIntercept


def test_point_widens_int_to_float():
    """Test integer coordinates are stored as floats"""
    p = Point2D(1, 4)
    assert p.x == 1.0 and p.y == 4.0
    assert type(p.x) is float and type(p.y) is float
    print("✓ Point2D int widening test passed")


def test_point_keeps_float32_value():
    """Test a float32 coordinate keeps its single-precision value"""
    p = Point2D(np.float32(1.04), np.float32(4.22))
    assert p.x == float(np.float32(1.04))
    assert p.x != 1.04
    assert type(p.x) is float
    print("✓ Point2D float32 widening test passed")


def test_point_is_immutable():
    """Test Point2D rejects attribute assignment"""
    p = Point2D(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5.0
    with pytest.raises(AttributeError):
        p.z = 5.0
    print("✓ Point2D immutability test passed")


def test_point_equality_is_exact():
    """Test Point2D equality and hashing use exact field values"""
    assert Point2D(1, 2) == Point2D(1.0, 2.0)
    assert Point2D(0.1 + 0.2, 0) != Point2D(0.3, 0)
    assert Point2D(1, 2) != (1.0, 2.0)
    assert hash(Point2D(1, 2)) == hash(Point2D(1.0, 2.0))
    assert len({Point2D(1, 2), Point2D(1.0, 2.0), Point2D(2, 1)}) == 2
    print("✓ Point2D equality test passed")


def test_point_numpy_conversion():
    """Test Point2D to/from NumPy array"""
    p = Point2D(3, -2.5)
    arr = p.to_numpy()
    assert arr.dtype == np.float64
    assert np.array_equal(arr, [3.0, -2.5])
    assert Point2D.from_array(arr) == p
    print("✓ Point2D NumPy conversion test passed")


def test_point_from_array_rejects_wrong_shape():
    """Test Point2D.from_array requires shape (2,)"""
    with pytest.raises(ValueError):
        Point2D.from_array([1, 2, 3])
    with pytest.raises(ValueError):
        Point2D.from_array([[1, 2]])
    print("✓ Point2D shape check test passed")


def test_point_unbounded_flag():
    """Test is_unbounded needs both coordinates at the sentinel"""
    assert Point2D(UNBOUNDED, UNBOUNDED).is_unbounded
    assert not Point2D(UNBOUNDED, 0).is_unbounded
    assert not Point2D(2.4, 2.4).is_unbounded
    print("✓ Point2D unbounded flag test passed")


def test_point_repr():
    """Test Point2D repr"""
    assert repr(Point2D(1, 4)) == "Point2D(x=1.0, y=4.0)"
    print("✓ Point2D repr test passed")


def test_point_copy_and_pickle():
    """Test Point2D survives copy, deepcopy and pickle"""
    p = Point2D(1, 2)
    assert copy.copy(p) == p
    assert copy.deepcopy(p) == p
    restored = pickle.loads(pickle.dumps(p))
    assert restored == p
    assert isinstance(restored, Point2D)
    with pytest.raises(AttributeError):
        restored.x = 0.0
    print("✓ Point2D copy/pickle test passed")


def test_line_from_tuples_and_points():
    """Test endpoints given as pairs are converted to Point2D"""
    line = Line((1, 4), (-2, 3))
    assert line.start == Point2D(1, 4)
    assert line.end == Point2D(-2, 3)
    assert line == Line(Point2D(1, 4), Point2D(-2, 3))
    assert line != Line((-2, 3), (1, 4))
    print("✓ Line construction test passed")


def test_line_from_coordinates():
    """Test Line from four coordinates"""
    line = Line.from_coordinates(1, 4, -2, 3)
    assert line == Line((1, 4), (-2, 3))
    assert type(line.start.x) is float
    print("✓ Line from coordinates test passed")


def test_line_allows_missing_endpoints():
    """Test Line keeps None endpoints and to_numpy rejects them"""
    line = Line(None, None)
    assert line.start is None and line.end is None
    with pytest.raises(InvalidArgumentError):
        line.to_numpy()
    print("✓ Line missing endpoints test passed")


def test_line_allows_zero_length():
    """Test a zero-length Line is representable"""
    line = Line((2, 2), (2, 2))
    assert line.start == line.end
    print("✓ Line zero length test passed")


def test_line_is_immutable():
    """Test Line rejects attribute assignment"""
    line = Line((0, 0), (1, 1))
    with pytest.raises(AttributeError):
        line.start = Point2D(5, 5)
    print("✓ Line immutability test passed")


def test_line_numpy_conversion():
    """Test Line to NumPy array"""
    arr = Line((1, 1), (4, 4)).to_numpy()
    assert arr.shape == (2, 2)
    assert np.array_equal(arr, [[1.0, 1.0], [4.0, 4.0]])
    print("✓ Line NumPy conversion test passed")


def test_line_copy_and_pickle():
    """Test Line survives copy, deepcopy and pickle, including None endpoints"""
    line = Line((0, 0), (1, 1))
    assert copy.copy(line) == line
    deep = copy.deepcopy(line)
    assert deep == line
    assert deep.start == Point2D(0, 0)
    assert pickle.loads(pickle.dumps(line)) == line

    empty = pickle.loads(pickle.dumps(Line(None, None)))
    assert empty.start is None and empty.end is None
    print("✓ Line copy/pickle test passed")


def test_slope_intercept_value():
    """Test SlopeIntercept fields, unpacking, equality and immutability"""
    si = SlopeIntercept(0.5, 3)
    assert si.slope == 0.5
    assert si.y_intercept == 3.0
    slope, intercept = si
    assert (slope, intercept) == (0.5, 3.0)
    assert si == SlopeIntercept(0.5, 3.0)
    assert si != SlopeIntercept(0.5, 3.0000000000000004)
    assert hash(si) == hash(SlopeIntercept(0.5, 3.0))
    with pytest.raises(AttributeError):
        si.slope = 1.0
    print("✓ SlopeIntercept value test passed")


def test_slope_intercept_vertical_flag():
    """Test is_vertical is set only for the sentinel intercept"""
    assert SlopeIntercept(0.0, UNBOUNDED).is_vertical
    assert not SlopeIntercept(0.0, 3.0).is_vertical
    print("✓ SlopeIntercept vertical flag test passed")


def test_slope_intercept_copy_and_pickle():
    """Test SlopeIntercept survives copy, deepcopy and pickle"""
    si = SlopeIntercept(0.5, 3.0)
    assert copy.copy(si) == si
    assert copy.deepcopy(si) == si
    assert pickle.loads(pickle.dumps(si)) == si
    assert pickle.loads(pickle.dumps(SlopeIntercept(0.0, UNBOUNDED))).is_vertical
    print("✓ SlopeIntercept copy/pickle test passed")


def test_unbounded_is_max_double():
    """Test the sentinel is the largest finite double"""
    assert UNBOUNDED == sys.float_info.max
    assert np.isfinite(UNBOUNDED)
    print("✓ UNBOUNDED sentinel test passed")
