# -*- coding: utf-8 -*-
"""
Array Helpers - Shared image shape, element-kind, and domain helpers.

Small numpy helpers used by both the quantization and the filtering
processors: image shape/kind validation, the maximum representable value
of an integer kind, and the floating working copy used by the filters.

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
from imtoolbox.exceptions import TypeMismatchError, ValidationError


#: numpy dtype kinds accepted as real numeric sample domains.
REAL_KINDS = 'buif'


def is_real_numeric(dtype: np.dtype) -> bool:
    """Whether *dtype* is a boolean, integer, or floating kind."""
    return np.dtype(dtype).kind in REAL_KINDS


def validate_image(image, name: str = 'image') -> np.ndarray:
    """Validate an image and return it as an ndarray.

    Parameters
    ----------
    image : array_like
        2D ``(rows, cols)`` array or 3D band stack.
    name : str
        Argument name for error messages. Default ``'image'``.

    Returns
    -------
    np.ndarray
        The input as an ndarray. No copy is made for ndarray inputs.

    Raises
    ------
    ValidationError
        If the array is not 2D or 3D, or is empty.
    TypeMismatchError
        If the element kind is not real numeric.
    """
    arr = np.asarray(image)
    if arr.ndim not in (2, 3):
        raise ValidationError(
            f"invalid shape: {name} must be 2D or a 3D band stack, "
            f"got shape {arr.shape}"
        )
    if arr.size == 0:
        raise ValidationError(f"invalid shape: {name} is empty")
    if not is_real_numeric(arr.dtype):
        raise TypeMismatchError(
            f"{name} must have a real numeric dtype, got {arr.dtype}"
        )
    return arr


def kind_max(dtype: np.dtype) -> int:
    """Maximum representable value of a boolean or integer dtype."""
    dtype = np.dtype(dtype)
    if dtype.kind == 'b':
        return 1
    return int(np.iinfo(dtype).max)


def to_working_float(image: np.ndarray) -> np.ndarray:
    """Return the floating working copy of *image*.

    Integer and boolean images are converted to float64 and rescaled
    into ``[0, 1]`` by their kind maximum. float32 and float64 images are
    returned unchanged; float16 is promoted to float32.

    The caller's array is never written to.
    """
    if image.dtype.kind == 'f':
        if image.dtype.itemsize < 4:
            return image.astype(np.float32)
        return image
    working = image.astype(np.float64)
    working /= kind_max(image.dtype)
    return working
