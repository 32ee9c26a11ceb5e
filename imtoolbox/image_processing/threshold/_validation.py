# -*- coding: utf-8 -*-
"""
Threshold Validation Helpers - Level and output-value sanitization.

Canonicalizes user-supplied quantization thresholds ("levels") and bin
output values. Levels and values may arrive as flat sequences, ``(1, n)``
rows, or ``(n, 1)`` columns; all are reduced to a fresh 1D array so the
caller's objects are never reordered or written to.

Author
------
Duane Smalley, PhD
duane.d.smalley@gmail.com

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Third-party
import numpy as np

# imtoolbox internal
from imtoolbox.exceptions import (
    SizeMismatchError,
    TypeMismatchError,
    ValidationError,
)
from imtoolbox.image_processing._arrays import is_real_numeric, kind_max


def as_vector(data, name: str) -> np.ndarray:
    """Reduce a row, column, or flat sequence to a 1D array.

    Raises
    ------
    ValidationError
        If *data* is not one-dimensional in any of the accepted layouts.
    """
    arr = np.asarray(data)
    if arr.ndim == 2 and 1 in arr.shape:
        arr = arr.reshape(-1)
    if arr.ndim != 1:
        raise ValidationError(
            f"invalid shape: {name} must be one-dimensional "
            f"((n,), (1, n) or (n, 1)), got shape {arr.shape}"
        )
    return arr


def check_comparable(dtype: np.dtype, name: str) -> None:
    """Require a real numeric dtype so samples and *name* can be compared.

    Raises
    ------
    TypeMismatchError
        If *dtype* is complex, string, object, or another non-real kind.
    """
    if not is_real_numeric(dtype):
        raise TypeMismatchError(
            f"{name} dtype {np.dtype(dtype)} cannot be compared with "
            f"real-valued image samples"
        )


def sanitize_levels(levels) -> np.ndarray:
    """Return the thresholds as a new ascending 1D array.

    Parameters
    ----------
    levels : array_like
        One or more finite thresholds, any one-dimensional layout.
        Duplicates are allowed.

    Returns
    -------
    np.ndarray
        Sorted copy, shape ``(n,)``.

    Raises
    ------
    ValidationError
        If *levels* is not one-dimensional, is empty, or holds NaN/inf.
    TypeMismatchError
        If *levels* is not real numeric.
    """
    thresholds = as_vector(levels, 'levels')
    if thresholds.size == 0:
        raise ValidationError(
            "invalid shape: levels must hold at least one threshold"
        )
    check_comparable(thresholds.dtype, 'levels')
    if not np.all(np.isfinite(thresholds)):
        raise ValidationError("levels must be finite")
    return np.sort(thresholds)


def sanitize_values(values, n_levels: int) -> np.ndarray:
    """Return the bin output values as a new 1D array.

    Parameters
    ----------
    values : array_like
        ``n_levels + 1`` outputs, any one-dimensional layout.
    n_levels : int
        Number of thresholds.

    Returns
    -------
    np.ndarray
        Copy of *values*, shape ``(n_levels + 1,)``, dtype preserved.

    Raises
    ------
    ValidationError
        If *values* is not one-dimensional.
    SizeMismatchError
        If *values* does not hold exactly ``n_levels + 1`` entries.
    TypeMismatchError
        If *values* is not real numeric.
    """
    outputs = as_vector(values, 'values')
    if outputs.size != n_levels + 1:
        raise SizeMismatchError(
            f"values must have {n_levels + 1} entries for {n_levels} "
            f"levels, got {outputs.size}"
        )
    check_comparable(outputs.dtype, 'values')
    return outputs.copy()


def default_values(n_levels: int, image_dtype: np.dtype) -> np.ndarray:
    """Ordinal outputs ``0..n_levels`` in the image's element kind.

    Boolean images, and integer images whose kind cannot hold
    ``n_levels``, get the smallest unsigned kind that can.
    """
    dtype = np.dtype(image_dtype)
    if dtype.kind == 'b' or (dtype.kind in 'iu' and n_levels > kind_max(dtype)):
        dtype = np.min_scalar_type(n_levels)
    return np.arange(n_levels + 1).astype(dtype)
