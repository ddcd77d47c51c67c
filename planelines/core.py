"""
Core constants, argument checks and logging for planelines
"""

import logging

import numpy as np

logger = logging.getLogger("planelines")
logger.addHandler(logging.NullHandler())

# Largest finite double. Stands in for "unbounded" in degenerate results
# (vertical-line intercept, intersection of parallel lines).
UNBOUNDED = float(np.finfo(np.float64).max)


class InvalidArgumentError(ValueError):
    """Raised when a required point or line argument is missing"""


def require(**arguments):
    """
    Check that every keyword argument is present

    Parameters:
    -----------
    **arguments
        Argument name -> value. Names are only used in the error message.

    Raises:
    -------
    InvalidArgumentError
        If any value is None
    """
    for name, value in arguments.items():
        if value is None:
            raise InvalidArgumentError(f"{name} must not be None")
