"""
Structural validators for covariance matrices and simplices.

These return a plain bool and never raise on malformed numeric content;
error reporting is the job of check_cov_matrix / check_simplex, which take
the validator as an injectable argument so callers can substitute their own.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from scipy.linalg import eigvalsh

from pystatguard.core.tolerances import select_tolerance


def is_valid_cov_matrix(matrix: ArrayLike, tolerance: float | None = None) -> bool:
    """
    Is matrix a valid covariance matrix?

    Requires a non-empty square matrix of finite values that is symmetric
    and positive semi-definite, each up to `tolerance` (absolute). The
    default tolerance is chosen from the matrix dtype.

    Args:
        matrix: 2D array-like
        tolerance: Absolute tolerance, or None for the dtype default

    Returns:
        True if every condition holds
    """
    Sigma = np.asarray(matrix)
    if Sigma.ndim != 2 or Sigma.shape[0] != Sigma.shape[1] or Sigma.shape[0] == 0:
        return False
    if not np.issubdtype(Sigma.dtype, np.number):
        return False
    if tolerance is None:
        tolerance = select_tolerance(Sigma.dtype).atol

    Sigma = Sigma.astype(np.float64, copy=False)
    if not np.all(np.isfinite(Sigma)):
        return False
    if not np.allclose(Sigma, Sigma.T, rtol=0.0, atol=tolerance):
        return False

    # Symmetrise before the eigen solve so rounding noise can't produce
    # complex eigenvalues.
    eigenvalues = eigvalsh((Sigma + Sigma.T) / 2.0)
    return bool(eigenvalues[0] >= -tolerance)


def is_valid_simplex(vector: ArrayLike, tolerance: float | None = None) -> bool:
    """
    Is vector a valid probability simplex?

    Requires a non-empty 1D vector whose entries are all >= 0 and sum to
    one within `tolerance` (absolute).
    """
    theta = np.asarray(vector)
    if theta.ndim != 1 or theta.shape[0] == 0:
        return False
    if not np.issubdtype(theta.dtype, np.number):
        return False
    if tolerance is None:
        tolerance = select_tolerance(theta.dtype).atol

    theta = theta.astype(np.float64, copy=False)
    if not np.all(theta >= 0):
        return False
    return bool(abs(1.0 - theta.sum()) <= tolerance)
