#!/usr/bin/env python3
"""
Basic usage examples for planelines
"""

import logging

import numpy as np
from planelines import (
    Line,
    Point2D,
    distance,
    get_incident_point,
    is_parallel,
    is_perpendicular,
    slope_intercept,
)


def example_distance():
    """Example using distance"""
    print("=== Distance Example ===")

    a = Point2D(1, 4)
    b = Point2D(-2, 3)
    print(f"distance({a}, {b}) = {distance(a, b)}")

    # float32 coordinates keep their single-precision value
    a32 = Point2D(np.float32(1.04), np.float32(4.22))
    b32 = Point2D(np.float32(-2.2), np.float32(3.03))
    print(f"distance({a32}, {b32}) = {distance(a32, b32)}")


def example_slope_intercept():
    """Example using slope_intercept"""
    print("\n=== Slope / Intercept Example ===")

    for line in (Line((1, 4), (-2, 3)), Line((-2, 3), (1, 3)), Line((1, 3), (1, -2))):
        result = slope_intercept(line)
        note = " (vertical)" if result.is_vertical else ""
        print(f"{line}: {result}{note}")


def example_relations():
    """Example using the parallel and perpendicular tests"""
    print("\n=== Parallel / Perpendicular Example ===")

    v1 = Line((1, 3), (1, -2))
    v2 = Line((3, 3), (3, -2))
    h = Line((2, 0), (-1, 0))
    print(f"two vertical lines parallel: {is_parallel(v1, v2)}")
    print(f"two vertical lines perpendicular: {is_perpendicular(v1, v2)}")
    print(f"vertical and horizontal perpendicular: {is_perpendicular(v1, h)}")


def example_incident_point():
    """Example using get_incident_point"""
    print("\n=== Incident Point Example ===")

    l1 = Line.from_coordinates(1, 1, 4, 4)
    l2 = Line.from_coordinates(1, 8, 2, 4)
    print(f"intersection: {get_incident_point(l1, l2)}")

    p = get_incident_point(Line((1, 3), (1, -2)), Line((3, 3), (3, -2)))
    print(f"parallel lines: {p}, unbounded={p.is_unbounded}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    example_distance()
    example_slope_intercept()
    example_relations()
    example_incident_point()
